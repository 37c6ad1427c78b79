"""
Default configuration settings for avatar partitioning and rendering.
"""

DEFAULT_CONFIG = {
    # Engine settings
    "color_strategy": "zoned",  # "zoned" or "flat"
    "theme": "light",  # Theme used when the caller does not pass one
    "overflow_marker": "*",  # Glyph for the overflow cell of 5+ groups

    # Geometry
    "avatar_size": 54,  # Side of the SVG avatar in pixels
    "cell_gap": 1.5,  # Gap between cells in pixels at avatar_size

    # Conversation color cache
    "cache_max_conversations": 512,  # None keeps every conversation

    # Rasterization settings
    "raster_size": 108,  # Side of PNG output in pixels

    # Output and logging
    "output_dir": "avatars",
    "log_level": "INFO",
}

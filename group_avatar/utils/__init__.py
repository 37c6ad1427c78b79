"""
Group Avatar - Utilities Package
================================
Logging and label helpers. The I/O (pandas) and preview (matplotlib)
modules are imported directly where needed.
"""

from group_avatar.utils.logger import (
    setup_logger, get_logger, LogCapture, log_function_call
)
from group_avatar.utils.text import (
    parse_address, first_name, initials, first_initial
)

__all__ = [
    'setup_logger', 'get_logger', 'LogCapture', 'log_function_call',
    'parse_address', 'first_name', 'initials', 'first_initial'
]

"""
Input/output utilities for configs, conversation batches and avatar files.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)

PARTICIPANT_SEPARATOR = ";"
REQUIRED_COLUMNS = ("conversation_id", "participants")


def load_conversations(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load a conversation batch CSV.

    The file needs `conversation_id` and `participants` columns; participants
    are address strings ("Name <email>" or "email") separated by ";".

    Args:
        file_path: Path to the CSV file

    Returns:
        DataFrame with a `participant_list` column of address strings added
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    except Exception as e:
        logger.error(f"Error loading CSV file {file_path}: {e}")
        raise

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{file_path} is missing column(s): {', '.join(missing)}")

    df["participant_list"] = df["participants"].map(split_participants)
    logger.info(f"Successfully loaded {len(df)} conversations from {file_path}")
    return df


def split_participants(value: str) -> List[str]:
    """Split a ';'-separated participant cell into address strings."""
    return [part.strip() for part in (value or "").split(PARTICIPANT_SEPARATOR) if part.strip()]


def save_results(
    results: Union[pd.DataFrame, List[Dict[str, Any]]],
    output_path: Union[str, Path],
    format: str = 'csv'
) -> Path:
    """
    Save a batch summary to a file.

    Args:
        results: DataFrame or list of dictionaries with results
        output_path: Path to save the results
        format: File format ('csv' or 'json')

    Returns:
        Path the results were written to
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)

    if isinstance(results, list):
        results = pd.DataFrame(results)

    if format.lower() == 'csv':
        results.to_csv(output_path, index=False)
    elif format.lower() == 'json':
        if output_path.suffix != '.json':
            output_path = output_path.with_suffix('.json')
        results.to_json(output_path, orient='records', indent=2)
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'csv' or 'json'.")

    logger.info(f"Results saved to {output_path}")
    return output_path


def save_svg(
    svg_code: str,
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> Path:
    """
    Save SVG markup to a file.

    Args:
        svg_code: SVG markup
        output_path: Path to save the SVG
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(svg_code)
        logger.info(f"SVG saved to: {output_path}")
    except OSError as e:
        logger.error(f"Error saving SVG to {output_path}: {e}")
        raise

    return output_path


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")
    return config


def save_config(
    config: Dict[str, Any],
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Dictionary containing configuration
        output_path: Path to save the configuration
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2)
        logger.info(f"Configuration saved to: {output_path}")
    except OSError as e:
        logger.error(f"Error saving configuration to {output_path}: {e}")
        raise

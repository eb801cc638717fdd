"""Path management utilities for orbit-node-config library."""

from pathlib import Path
from typing import Optional, Union

from .constants import NODE_CONFIG_FILENAME, SETUP_SCRIPT_CONFIG_FILENAME


def get_default_output_dir() -> Path:
    """
    Get default output directory.

    Returns:
        Current working directory
    """
    return Path.cwd()


def get_output_paths(output_dir: Optional[Union[Path, str]] = None) -> tuple[Path, Path]:
    """
    Get output file paths.

    Args:
        output_dir: Custom output directory (defaults to the current directory)

    Returns:
        Tuple of (node_config_path, setup_script_config_path)
    """
    if output_dir is None:
        output_dir = get_default_output_dir()
    else:
        output_dir = Path(output_dir).absolute()

    node_config_path = output_dir / NODE_CONFIG_FILENAME
    setup_script_config_path = output_dir / SETUP_SCRIPT_CONFIG_FILENAME

    return (node_config_path, setup_script_config_path)

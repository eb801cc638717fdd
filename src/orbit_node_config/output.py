"""Config file writing for orbit-node-config library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import constants
from .paths import get_output_paths
from .types import NodeConfig

logger = logging.getLogger(constants.LOGGER_NAME)


def write_configs(
    node_config: NodeConfig,
    setup_script_config: Dict[str, Any],
    output_dir: Optional[Union[Path, str]] = None,
) -> tuple[Path, Path]:
    """
    Save the node config and the setup script config to disk.

    Both documents are serialized and written to temporary files before
    either target is replaced, so a failure leaves no new files behind.

    Args:
        node_config: Node config document
        setup_script_config: Orbit setup script config
        output_dir: Target directory (defaults to the current directory)

    Returns:
        Tuple of (node_config_path, setup_script_config_path)

    Creates the output directory if it doesn't exist.
    """
    node_config_path, setup_script_config_path = get_output_paths(output_dir)

    node_config_text = json.dumps(node_config, indent=2)
    setup_script_config_text = json.dumps(setup_script_config, indent=2)

    node_config_path.parent.mkdir(parents=True, exist_ok=True)

    targets = [
        (node_config_path, node_config_text),
        (setup_script_config_path, setup_script_config_text),
    ]
    replaced = []
    try:
        for path, text in targets:
            path.with_suffix(path.suffix + ".tmp").write_text(text + "\n", encoding="utf-8")
        for path, _ in targets:
            path.with_suffix(path.suffix + ".tmp").replace(path)
            replaced.append(path)
    except OSError:
        # Leave neither document behind when either one could not be written
        for path, _ in targets:
            path.with_suffix(path.suffix + ".tmp").unlink(missing_ok=True)
        for path in replaced:
            path.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {node_config_path} and {setup_script_config_path}")
    return (node_config_path, setup_script_config_path)

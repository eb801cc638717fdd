"""Main API for orbit-node-config library."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import constants
from .environment import DeploymentEnvironment
from .node_config import prepare_node_config
from .output import write_configs
from .setup_script import prepare_orbit_setup_script_config
from .types import DeploymentResult, NodeConfig, NodeConfigParams

logger = logging.getLogger(constants.LOGGER_NAME)


def build_node_config_params(
    environment: DeploymentEnvironment, deployment: DeploymentResult
) -> NodeConfigParams:
    """Combine deployment options and rollup creation results."""
    return NodeConfigParams(
        chain_name=environment.chain_name,
        chain_config=deployment.chain_config,
        core_contracts=deployment.core_contracts,
        batch_poster_private_key=environment.batch_poster_private_key,
        validator_private_key=environment.validator_private_key,
        avail_address_seed=environment.avail_address_seed,
        avail_app_id=environment.avail_app_id,
        parent_chain_id=environment.parent_chain_id,
        parent_chain_rpc_url=environment.parent_chain_rpc_url,
        parent_chain_beacon_rpc_url=environment.parent_chain_beacon_rpc_url,
        fallback_s3_config=environment.fallback_s3_config,
        das_server_url=environment.das_server_url,
    )


def generate_configs(
    environment: DeploymentEnvironment, deployment: DeploymentResult
) -> tuple[NodeConfig, Dict[str, Any]]:
    """
    Derive the node config and the setup script config.

    Args:
        environment: Deployment options
        deployment: Rollup creation results

    Returns:
        Tuple of (node_config, setup_script_config)

    Raises:
        NodeConfigError: If either document cannot be derived
    """
    node_config = prepare_node_config(build_node_config_params(environment, deployment))
    setup_script_config = prepare_orbit_setup_script_config(
        chain_name=environment.chain_name,
        chain_config=deployment.chain_config,
        core_contracts=deployment.core_contracts,
        deployer=deployment.deployer,
        batch_poster=deployment.batch_poster,
        validator=deployment.validator,
        parent_chain_id=environment.parent_chain_id,
        parent_chain_rpc_url=environment.parent_chain_rpc_url,
    )
    return node_config, setup_script_config


def generate_and_write_configs(
    environment: DeploymentEnvironment,
    deployment: DeploymentResult,
    output_dir: Optional[Union[Path, str]] = None,
) -> tuple[Path, Path]:
    """
    Derive both documents and save them.

    Nothing is written unless both documents were derived.

    Returns:
        Tuple of (node_config_path, setup_script_config_path)
    """
    node_config, setup_script_config = generate_configs(environment, deployment)
    paths = write_configs(node_config, setup_script_config, output_dir)
    logger.info(f"Node config and Orbit setup script config written to {paths[0].parent}")
    return paths

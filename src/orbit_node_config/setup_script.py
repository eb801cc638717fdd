"""Orbit setup script config for orbit-node-config library."""

from typing import Any, Dict

from . import constants
from .types import ChainConfig, CoreContracts


def prepare_orbit_setup_script_config(
    chain_name: str,
    chain_config: ChainConfig,
    core_contracts: CoreContracts,
    deployer: str,
    batch_poster: str,
    validator: str,
    parent_chain_id: int,
    parent_chain_rpc_url: str,
) -> Dict[str, Any]:
    """
    Build the config consumed by the Orbit setup script.

    The deployer receives network and infrastructure fees and owns the chain.

    Returns:
        Flat dictionary of addresses and chain identity, followed by every
        core contract address
    """
    config: Dict[str, Any] = {
        "networkFeeReceiver": deployer,
        "infrastructureFeeCollector": deployer,
        "staker": validator,
        "batchPoster": batch_poster,
        "chainOwner": deployer,
        "chainId": chain_config["chainId"],
        "chainName": chain_name,
        "minL2BaseFee": constants.MIN_L2_BASE_FEE,
        "parentChainId": parent_chain_id,
        "parent-chain-node-url": parent_chain_rpc_url,
        "utils": core_contracts.validator_utils,
    }
    config.update(core_contracts.to_dict())
    return config

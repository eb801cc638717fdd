"""Arbitrum chain config helpers for orbit-node-config library."""

import json
import random
from typing import Any, Mapping, Union

from . import constants
from .exceptions import InvalidChainConfigError
from .types import ChainConfig


def generate_chain_id() -> int:
    """Pick a random chain id that is unlikely to collide with public chains."""
    low, high = constants.CHAIN_ID_RANGE
    return random.randint(low, high)


def prepare_chain_config(
    chain_id: int,
    initial_chain_owner: str,
    data_availability_committee: bool = False,
    **arbitrum_overrides: Any,
) -> ChainConfig:
    """
    Build the default chain config for a new Orbit chain.

    All Ethereum forks are active from genesis.

    Args:
        chain_id: Chain id of the new chain
        initial_chain_owner: Address that owns the chain at genesis
        data_availability_committee: True for AnyTrust (DAC) chains
        **arbitrum_overrides: Extra or replacement keys for the "arbitrum" block

    Returns:
        Chain config dictionary with camelCase keys
    """
    arbitrum = {
        "EnableArbOS": True,
        "AllowDebugPrecompiles": False,
        "DataAvailabilityCommittee": data_availability_committee,
        "InitialArbOSVersion": constants.DEFAULT_INITIAL_ARBOS_VERSION,
        "InitialChainOwner": initial_chain_owner,
        "GenesisBlockNum": 0,
        "MaxCodeSize": constants.DEFAULT_MAX_CODE_SIZE,
        "MaxInitCodeSize": constants.DEFAULT_MAX_INIT_CODE_SIZE,
    }
    arbitrum.update(arbitrum_overrides)

    return {
        "chainId": chain_id,
        "homesteadBlock": 0,
        "daoForkBlock": None,
        "daoForkSupport": True,
        "eip150Block": 0,
        "eip150Hash": "0x" + "0" * 64,
        "eip155Block": 0,
        "eip158Block": 0,
        "byzantiumBlock": 0,
        "constantinopleBlock": 0,
        "petersburgBlock": 0,
        "istanbulBlock": 0,
        "muirGlacierBlock": 0,
        "berlinBlock": 0,
        "londonBlock": 0,
        "clique": {"period": 0, "epoch": 0},
        "arbitrum": arbitrum,
    }


def parse_chain_config(value: Union[str, Mapping[str, Any]]) -> ChainConfig:
    """
    Parse a chain config from a JSON string or a mapping.

    Rollup creation stores the chain config as a JSON string in the
    transaction input; already decoded records are accepted as well.

    Raises:
        InvalidChainConfigError: If the value is not valid JSON or lacks
            chainId / arbitrum
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidChainConfigError(f"Chain config is not valid JSON: {e}") from e

    if not isinstance(value, Mapping):
        raise InvalidChainConfigError(
            f"Chain config must be an object, got {type(value).__name__}"
        )

    chain_config = dict(value)
    if "chainId" not in chain_config:
        raise InvalidChainConfigError("Chain config is missing chainId")
    if not isinstance(chain_config.get("arbitrum"), Mapping):
        raise InvalidChainConfigError("Chain config is missing the arbitrum block")

    return chain_config

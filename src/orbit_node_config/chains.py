"""Parent chain classification for orbit-node-config library."""

from enum import IntEnum
from typing import List

from .constants import PARENT_CHAINS
from .exceptions import UnsupportedParentChainError
from .types import ParentChain


class ParentChainLayer(IntEnum):
    """
    Settlement layer of a parent chain.

    An Orbit chain settling on a LAYER_1 parent is itself an L2; one settling
    on a LAYER_2 parent is an L3.
    """

    LAYER_1 = 1
    LAYER_2 = 2


def validate_parent_chain(chain_id: int) -> int:
    """
    Check that a chain id is a supported parent chain.

    Args:
        chain_id: Numeric chain id

    Returns:
        The same chain id

    Raises:
        UnsupportedParentChainError: If the chain id is not in PARENT_CHAINS
    """
    if chain_id not in PARENT_CHAINS:
        raise UnsupportedParentChainError(f"Parent chain not supported: {chain_id}")
    return chain_id


def get_parent_chain(chain_id: int) -> ParentChain:
    """Look up a supported parent chain by id."""
    entry = PARENT_CHAINS[validate_parent_chain(chain_id)]
    return ParentChain(
        chain_id=chain_id,
        name=entry["name"],
        layer=entry["layer"],
        is_arbitrum=entry["is_arbitrum"],
        rpc_url=entry["rpc_url"],
    )


def get_parent_chain_layer(chain_id: int) -> ParentChainLayer:
    return ParentChainLayer(PARENT_CHAINS[validate_parent_chain(chain_id)]["layer"])


def parent_chain_is_arbitrum(chain_id: int) -> bool:
    return PARENT_CHAINS[validate_parent_chain(chain_id)]["is_arbitrum"]


def supported_parent_chains() -> List[ParentChain]:
    """All supported parent chains, ordered by chain id."""
    return [get_parent_chain(chain_id) for chain_id in sorted(PARENT_CHAINS)]

"""Parent chain RPC queries for orbit-node-config library."""

import requests

from .exceptions import RpcChainMismatchError


def get_chain_id(rpc_url: str) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain id reported by eth_chainId

    Raises:
        ValueError: If RPC returns an error or no valid hex chain id
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=30,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if isinstance(result, dict) and "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        chain_id = result.get("result") if isinstance(result, dict) else None
        if not isinstance(chain_id, str):
            raise ValueError(f"Invalid eth_chainId response: {result!r}")
        try:
            return int(chain_id, 16)
        except ValueError as e:
            raise ValueError(f"Invalid eth_chainId result: {chain_id!r}") from e

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def verify_chain_id(rpc_url: str, expected_chain_id: int) -> None:
    """
    Check that an RPC endpoint serves the expected chain.

    Raises:
        RpcChainMismatchError: If the endpoint reports another chain id
    """
    actual = get_chain_id(rpc_url)
    if actual != expected_chain_id:
        raise RpcChainMismatchError(
            f"RPC endpoint {rpc_url} serves chain {actual}, expected {expected_chain_id}"
        )

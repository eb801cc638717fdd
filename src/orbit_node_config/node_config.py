"""Node configuration derivation for orbit-node-config library."""

import json
import logging
from typing import Any, Dict, List

from . import constants
from .chains import ParentChainLayer, get_parent_chain_layer, parent_chain_is_arbitrum
from .exceptions import MissingRequiredFieldError
from .types import CoreContracts, FallbackS3Config, NodeConfig, NodeConfigParams

logger = logging.getLogger(constants.LOGGER_NAME)


def sanitize_private_key(private_key: str) -> str:
    """
    Strip a leading 0x marker from a hex private key.

    The node expects bare hex in its wallet config.
    """
    return private_key[2:] if private_key.startswith("0x") else private_key


def get_disable_blob_reader(parent_chain_id: int) -> bool:
    """
    Whether the node must skip reading blobs from its parent chain.

    Blobs exist on layer 1 parents and are bridged by Arbitrum parents;
    any other layer 2 parent has none to read.
    """
    if (
        get_parent_chain_layer(parent_chain_id) != ParentChainLayer.LAYER_1
        and not parent_chain_is_arbitrum(parent_chain_id)
    ):
        return True

    return False


def _stringify_info_json(info_json: List[Dict[str, Any]]) -> str:
    return json.dumps(info_json)


def _rollup_info(core_contracts: CoreContracts) -> Dict[str, Any]:
    return {
        "bridge": core_contracts.bridge,
        "inbox": core_contracts.inbox,
        "sequencer-inbox": core_contracts.sequencer_inbox,
        "rollup": core_contracts.rollup,
        "validator-utils": core_contracts.validator_utils,
        "validator-wallet-creator": core_contracts.validator_wallet_creator,
        "deployed-at": core_contracts.deployed_at_block_number,
    }


def _fallback_s3_service_config(fallback_s3_config: FallbackS3Config) -> Dict[str, Any]:
    if not fallback_s3_config.validate().enable:
        return {"enable": False}

    return {
        "enable": True,
        "access-key": fallback_s3_config.access_key,
        "bucket": fallback_s3_config.bucket,
        "object-prefix": fallback_s3_config.object_prefix,
        "region": fallback_s3_config.region,
        "secret-key": fallback_s3_config.secret_key,
        "discard-after-timeout": False,
    }


def _data_availability_config(params: NodeConfigParams) -> Dict[str, Any]:
    das_server_url = params.das_server_url or constants.DAS_SERVER_FALLBACK_URL
    return {
        "enable": True,
        "sequencer-inbox-address": params.core_contracts.sequencer_inbox,
        "parent-chain-node-url": params.parent_chain_rpc_url,
        "rest-aggregator": {
            "enable": True,
            "urls": [f"{das_server_url}:{constants.DAS_REST_PORT}"],
        },
        "rpc-aggregator": {
            "enable": True,
            "assumed-honest": constants.DAS_ASSUMED_HONEST,
        },
    }


def prepare_node_config(params: NodeConfigParams) -> NodeConfig:
    """
    Derive the Nitro node configuration for a freshly deployed Orbit chain.

    Args:
        params: Deployment results, operator keys and feature toggles

    Returns:
        Node config document with hyphenated keys. Optional blocks are
        absent (not null) when their condition does not hold:
        - parent-chain.blob-client: only when a beacon URL is given
        - node.data-availability: only when the chain config enables
          the data availability committee

    Raises:
        MissingRequiredFieldError: If the parent chain is layer 1 and no
            beacon RPC URL was given
        UnsupportedParentChainError: If the parent chain id is unknown
        InvalidFallbackS3ConfigError: If fallback S3 is enabled but incomplete
    """
    parent_chain_id = params.parent_chain_id
    layer = get_parent_chain_layer(parent_chain_id)

    # Orbit chains settling on Ethereum need blob access through a beacon node
    if layer == ParentChainLayer.LAYER_1 and not params.parent_chain_beacon_rpc_url:
        raise MissingRequiredFieldError(
            "parentChainBeaconRpcUrl",
            '"parentChainBeaconRpcUrl" is required for L2 Orbit chains.',
        )

    chain_config = params.chain_config
    core_contracts = params.core_contracts

    config: NodeConfig = {
        "chain": {
            "info-json": _stringify_info_json(
                [
                    {
                        "chain-id": chain_config["chainId"],
                        "parent-chain-id": parent_chain_id,
                        "parent-chain-is-arbitrum": parent_chain_is_arbitrum(parent_chain_id),
                        "chain-name": params.chain_name,
                        "chain-config": chain_config,
                        "rollup": _rollup_info(core_contracts),
                    }
                ]
            ),
            "name": params.chain_name,
        },
        "parent-chain": {
            "connection": {
                "url": params.parent_chain_rpc_url,
            },
        },
        "http": {
            "addr": constants.HTTP_ADDR,
            "port": constants.HTTP_PORT,
            "vhosts": ["*"],
            "corsdomain": ["*"],
            "api": list(constants.HTTP_API),
        },
        "node": {
            "sequencer": True,
            "delayed-sequencer": {
                "enable": True,
                "use-merge-finality": False,
                "finalize-distance": 1,
            },
            "batch-poster": {
                "max-size": constants.BATCH_POSTER_MAX_SIZE,
                "enable": True,
                "parent-chain-wallet": {
                    "private-key": sanitize_private_key(params.batch_poster_private_key),
                },
            },
            "staker": {
                "enable": True,
                "strategy": constants.STAKER_STRATEGY,
                "parent-chain-wallet": {
                    "private-key": sanitize_private_key(params.validator_private_key),
                },
            },
            "dangerous": {
                "no-sequencer-coordinator": True,
                "disable-blob-reader": get_disable_blob_reader(parent_chain_id),
            },
            "avail": {
                "enable": True,
                "seed": params.avail_address_seed,
                "avail-api-url": constants.AVAIL_API_URL,
                "app-id": params.avail_app_id,
                "timeout": constants.AVAIL_TIMEOUT,
                "fallback-s3-service-config": _fallback_s3_service_config(
                    params.fallback_s3_config
                ),
                "avail-bridge-config": {
                    "avail-bridge-api-url": constants.AVAIL_BRIDGE_API_URL,
                    "vectorx-address": constants.AVAIL_VECTORX_ADDRESS,
                    "arbsepolia-rpc": constants.AVAIL_ARBSEPOLIA_RPC,
                },
            },
        },
        "execution": {
            "forwarding-target": "",
            "sequencer": {
                "enable": True,
                "max-tx-data-size": constants.SEQUENCER_MAX_TX_DATA_SIZE,
                "max-block-speed": constants.SEQUENCER_MAX_BLOCK_SPEED,
            },
            "caching": {
                "archive": True,
            },
        },
    }

    if params.parent_chain_beacon_rpc_url:
        config["parent-chain"]["blob-client"] = {
            "beacon-url": params.parent_chain_beacon_rpc_url,
        }

    if chain_config["arbitrum"].get("DataAvailabilityCommittee"):
        config["node"]["data-availability"] = _data_availability_config(params)

    logger.debug(
        f"Prepared node config for chain {chain_config['chainId']} "
        f"(parent chain {parent_chain_id}, layer {int(layer)})"
    )
    return config

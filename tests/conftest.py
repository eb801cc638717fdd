"""Shared pytest fixtures for orbit-node-config tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from orbit_node_config.chain_config import prepare_chain_config
from orbit_node_config.types import CoreContracts, FallbackS3Config, NodeConfigParams

ARBITRUM_SEPOLIA = 421614

DEPLOYER = "0x" + "11" * 20
BATCH_POSTER = "0x" + "22" * 20
VALIDATOR = "0x" + "33" * 20


@pytest.fixture
def core_contracts() -> CoreContracts:
    """Core contracts of a sample rollup deployment."""
    return CoreContracts(
        rollup="0x" + "a1" * 20,
        inbox="0x" + "a2" * 20,
        sequencer_inbox="0x" + "a3" * 20,
        bridge="0x" + "a4" * 20,
        validator_utils="0x" + "a5" * 20,
        validator_wallet_creator="0x" + "a6" * 20,
        deployed_at_block_number=4_250_000,
        outbox="0x" + "a7" * 20,
        upgrade_executor="0x" + "a8" * 20,
    )


@pytest.fixture
def chain_config() -> Dict[str, Any]:
    """Chain config without a data availability committee."""
    return prepare_chain_config(chain_id=97_531_000_001, initial_chain_owner=DEPLOYER)


@pytest.fixture
def dac_chain_config() -> Dict[str, Any]:
    """Chain config with the data availability committee enabled."""
    return prepare_chain_config(
        chain_id=97_531_000_002,
        initial_chain_owner=DEPLOYER,
        data_availability_committee=True,
    )


@pytest.fixture
def fallback_s3_config() -> FallbackS3Config:
    """A complete, enabled fallback S3 config."""
    return FallbackS3Config(
        enable=True,
        access_key="AKIAEXAMPLE",
        secret_key="s3cr3t/key+value",
        region="eu-central-1",
        object_prefix="orbit/batches/",
        bucket="orbit-fallback",
    )


@pytest.fixture
def make_params(
    chain_config: Dict[str, Any], core_contracts: CoreContracts
) -> Callable[..., NodeConfigParams]:
    """Factory for NodeConfigParams; keyword arguments override defaults."""

    def _make(**overrides: Any) -> NodeConfigParams:
        values: Dict[str, Any] = {
            "chain_name": "My Orbit Chain",
            "chain_config": chain_config,
            "core_contracts": core_contracts,
            "batch_poster_private_key": "0x" + "b" * 64,
            "validator_private_key": "0x" + "c" * 64,
            "avail_address_seed": "bottom drive obey lake curtain smoke basket hold race lonely fit walk",
            "avail_app_id": 42,
            "parent_chain_id": ARBITRUM_SEPOLIA,
            "parent_chain_rpc_url": "https://sepolia-rollup.arbitrum.io/rpc",
        }
        values.update(overrides)
        return NodeConfigParams(**values)

    return _make


@pytest.fixture
def deployment_result_json(chain_config: Dict[str, Any]) -> Dict[str, Any]:
    """Deployment result as written by the rollup creation step."""
    return {
        # Rollup creation stores the chain config as a JSON string
        "chainConfig": json.dumps(chain_config),
        "coreContracts": {
            "rollup": "0x" + "a1" * 20,
            "inbox": "0x" + "a2" * 20,
            "sequencerInbox": "0x" + "a3" * 20,
            "bridge": "0x" + "a4" * 20,
            "validatorUtils": "0x" + "a5" * 20,
            "validatorWalletCreator": "0x" + "a6" * 20,
            "outbox": "0x" + "a7" * 20,
            "upgradeExecutor": "0x" + "a8" * 20,
            "deployedAtBlockNumber": 4250000,
        },
        "deployer": DEPLOYER,
        "batchPoster": BATCH_POSTER,
        "validator": VALIDATOR,
    }


@pytest.fixture
def deployment_result_file(tmp_path: Path, deployment_result_json: Dict[str, Any]) -> Path:
    """Write the deployment result fixture to a temporary file."""
    path = tmp_path / "deployment.json"
    with open(path, "w") as f:
        json.dump(deployment_result_json, f, indent=2)
    return path


@pytest.fixture
def base_environ() -> Dict[str, str]:
    """Minimal environment for an Orbit chain on Arbitrum Sepolia."""
    return {
        "BATCH_POSTER_PRIVATE_KEY": "0x" + "b" * 64,
        "VALIDATOR_PRIVATE_KEY": "0x" + "c" * 64,
        "AVAIL_ADDR_SEED": "bottom drive obey lake curtain smoke basket hold race lonely fit walk",
        "AVAIL_APP_ID": "42",
        "PARENT_CHAIN_ID": str(ARBITRUM_SEPOLIA),
        "PARENT_CHAIN_RPC": "https://arb-sepolia.example/rpc",
    }

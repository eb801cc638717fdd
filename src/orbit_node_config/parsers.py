"""Deployment result parsers for orbit-node-config library."""

import json
from pathlib import Path
from typing import Any, Dict

from eth_utils import is_address, to_checksum_address

from .chain_config import parse_chain_config
from .exceptions import DefectiveDeploymentError, InvalidChainConfigError
from .types import CoreContracts, DeploymentResult

# camelCase key in deployment files -> CoreContracts field
REQUIRED_CONTRACTS = {
    "rollup": "rollup",
    "inbox": "inbox",
    "sequencerInbox": "sequencer_inbox",
    "bridge": "bridge",
    "validatorUtils": "validator_utils",
    "validatorWalletCreator": "validator_wallet_creator",
}

OPTIONAL_CONTRACTS = {
    "outbox": "outbox",
    "rollupEventInbox": "rollup_event_inbox",
    "challengeManager": "challenge_manager",
    "adminProxy": "admin_proxy",
    "upgradeExecutor": "upgrade_executor",
    "nativeToken": "native_token",
}


def normalize_address(value: Any, name: str) -> str:
    """
    Validate an address and return it checksummed.

    Args:
        value: Raw address from a deployment file
        name: Field name, used in error messages

    Raises:
        DefectiveDeploymentError: If value is not a valid address
    """
    if not isinstance(value, str) or not is_address(value):
        raise DefectiveDeploymentError(f"Invalid address for {name}: {value!r}")
    return to_checksum_address(value)


def parse_core_contracts(data: Dict[str, Any]) -> CoreContracts:
    """
    Parse the coreContracts record returned by rollup creation.

    Args:
        data: Mapping of camelCase contract names to addresses, plus
              deployedAtBlockNumber

    Returns:
        CoreContracts with checksummed addresses

    Raises:
        DefectiveDeploymentError: If a required contract or the deployment
            block number is missing or malformed
    """
    if not isinstance(data, dict):
        raise DefectiveDeploymentError(
            f"coreContracts must be an object, got {type(data).__name__}"
        )

    missing = [key for key in REQUIRED_CONTRACTS if key not in data]
    if missing:
        raise DefectiveDeploymentError(
            f"Missing core contracts in deployment result: {', '.join(missing)}"
        )

    block_number = data.get("deployedAtBlockNumber")
    if block_number is None:
        raise DefectiveDeploymentError("Missing deployedAtBlockNumber in deployment result")
    # Some tools write block numbers as hex strings
    if isinstance(block_number, str):
        try:
            block_number = int(block_number, 0)
        except ValueError as e:
            raise DefectiveDeploymentError(
                f"Invalid deployedAtBlockNumber in deployment result: {block_number!r}"
            ) from e
    elif isinstance(block_number, bool) or not isinstance(block_number, int):
        raise DefectiveDeploymentError(
            f"Invalid deployedAtBlockNumber in deployment result: {block_number!r}"
        )

    kwargs: Dict[str, Any] = {
        field: normalize_address(data[key], key) for key, field in REQUIRED_CONTRACTS.items()
    }
    for key, field in OPTIONAL_CONTRACTS.items():
        if data.get(key):
            kwargs[field] = normalize_address(data[key], key)

    return CoreContracts(deployed_at_block_number=block_number, **kwargs)


def parse_deployment_result(file_path: Path) -> DeploymentResult:
    """
    Parse a rollup deployment result JSON file.

    Expected keys: chainConfig (JSON string or object), coreContracts,
    deployer, batchPoster, validator.

    Args:
        file_path: Path to the deployment result file

    Returns:
        DeploymentResult

    Raises:
        DefectiveDeploymentError: If required data is missing or malformed
    """
    with open(file_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise DefectiveDeploymentError(f"Deployment result is not a JSON object: {file_path}")

    for key in ("chainConfig", "coreContracts", "deployer", "batchPoster", "validator"):
        if key not in data:
            raise DefectiveDeploymentError(f"Missing {key} in deployment result: {file_path}")

    try:
        chain_config = parse_chain_config(data["chainConfig"])
    except InvalidChainConfigError as e:
        raise DefectiveDeploymentError(f"Invalid chainConfig in {file_path}: {e}") from e

    return DeploymentResult(
        chain_config=chain_config,
        core_contracts=parse_core_contracts(data["coreContracts"]),
        deployer=normalize_address(data["deployer"], "deployer"),
        batch_poster=normalize_address(data["batchPoster"], "batchPoster"),
        validator=normalize_address(data["validator"], "validator"),
    )

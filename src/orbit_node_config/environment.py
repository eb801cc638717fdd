"""Environment variable loading for orbit-node-config library."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import constants
from .chains import ParentChainLayer, get_parent_chain, get_parent_chain_layer
from .exceptions import EnvironmentConfigError, InvalidFallbackS3ConfigError
from .types import FallbackS3Config

logger = logging.getLogger(constants.LOGGER_NAME)

FALLBACK_S3_VARIABLES = {
    "access_key": "FALLBACKS3_ACCESS_KEY",
    "secret_key": "FALLBACKS3_SECRET_KEY",
    "region": "FALLBACKS3_REGION",
    "object_prefix": "FALLBACKS3_OBJECT_PREFIX",
    "bucket": "FALLBACKS3_BUCKET",
}


@dataclass(frozen=True)
class DeploymentEnvironment:
    """Deployment options read once from the environment."""

    batch_poster_private_key: str
    validator_private_key: str
    avail_address_seed: str
    avail_app_id: int
    parent_chain_id: int
    parent_chain_rpc_url: str
    parent_chain_beacon_rpc_url: Optional[str]
    das_server_url: Optional[str]
    chain_name: str
    fallback_s3_config: FallbackS3Config


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    # Shell templates sometimes export unset values as the literal "undefined".
    # Set values are returned unstripped.
    val = environ.get(name)
    if val is None or val.strip() in ("", "undefined"):
        return None
    return val


def require_env(environ: Mapping[str, str], name: str) -> str:
    """
    Return the value of a required environment variable.

    Raises:
        EnvironmentConfigError: If the variable is missing or empty
    """
    val = _get(environ, name)
    if val is None:
        raise EnvironmentConfigError(f'Please provide the "{name}" environment variable')
    return val


def _require_int(environ: Mapping[str, str], name: str, default: Optional[int] = None) -> int:
    raw = _get(environ, name)
    if raw is None:
        if default is None:
            raise EnvironmentConfigError(f'Please provide the "{name}" environment variable')
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise EnvironmentConfigError(f"{name} is not a valid number: {raw!r}") from e


def load_fallback_s3_config(environ: Mapping[str, str]) -> FallbackS3Config:
    """
    Read the fallback S3 toggle and fields.

    Raises:
        EnvironmentConfigError: If enabled and any field is missing
    """
    enable = (_get(environ, "FALLBACKS3_ENABLE") or "").strip().lower() == "true"
    if not enable:
        return FallbackS3Config(enable=False)

    config = FallbackS3Config(
        enable=True,
        **{field: _get(environ, var) for field, var in FALLBACK_S3_VARIABLES.items()},
    )
    try:
        return config.validate()
    except InvalidFallbackS3ConfigError as e:
        missing = [FALLBACK_S3_VARIABLES[field] for field in config.missing_fields()]
        raise EnvironmentConfigError(
            f"Please provide all details for fallback s3, missing: {', '.join(missing)}"
        ) from e


def load_environment(environ: Optional[Mapping[str, str]] = None) -> DeploymentEnvironment:
    """
    Read deployment options from environment variables.

    Args:
        environ: Variables to read (defaults to os.environ)

    Returns:
        DeploymentEnvironment

    Raises:
        EnvironmentConfigError: If a required variable is missing or malformed
        UnsupportedParentChainError: If PARENT_CHAIN_ID is not supported
    """
    if environ is None:
        environ = os.environ

    parent_chain_id = _require_int(
        environ, "PARENT_CHAIN_ID", default=constants.DEFAULT_PARENT_CHAIN_ID
    )
    parent_chain = get_parent_chain(parent_chain_id)

    parent_chain_rpc_url = _get(environ, "PARENT_CHAIN_RPC")
    if parent_chain_rpc_url is None:
        logger.warning(
            "PARENT_CHAIN_RPC is not set, falling back to the public endpoint "
            f"{parent_chain.rpc_url}; you may encounter timeout errors"
        )
        parent_chain_rpc_url = parent_chain.rpc_url

    # Only Orbit chains settling on Ethereum read blobs from a beacon node
    beacon_rpc_url = None
    if get_parent_chain_layer(parent_chain_id) == ParentChainLayer.LAYER_1:
        beacon_rpc_url = _get(environ, "ETHEREUM_BEACON_RPC_URL")

    return DeploymentEnvironment(
        batch_poster_private_key=require_env(environ, "BATCH_POSTER_PRIVATE_KEY"),
        validator_private_key=require_env(environ, "VALIDATOR_PRIVATE_KEY"),
        avail_address_seed=require_env(environ, "AVAIL_ADDR_SEED"),
        avail_app_id=_require_int(environ, "AVAIL_APP_ID"),
        parent_chain_id=parent_chain_id,
        parent_chain_rpc_url=parent_chain_rpc_url,
        parent_chain_beacon_rpc_url=beacon_rpc_url,
        das_server_url=_get(environ, "DAS_SERVER_URL"),
        chain_name=_get(environ, "CHAIN_NAME") or constants.DEFAULT_CHAIN_NAME,
        fallback_s3_config=load_fallback_s3_config(environ),
    )

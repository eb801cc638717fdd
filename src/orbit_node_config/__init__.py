"""
orbit-node-config: derive Nitro node configs for Avail-backed Orbit chains
"""

from importlib.metadata import PackageNotFoundError, version

from .chain_config import generate_chain_id, parse_chain_config, prepare_chain_config
from .chains import (
    ParentChainLayer,
    get_parent_chain,
    get_parent_chain_layer,
    parent_chain_is_arbitrum,
    validate_parent_chain,
)
from .environment import DeploymentEnvironment, load_environment
from .exceptions import (
    DefectiveDeploymentError,
    EnvironmentConfigError,
    InvalidChainConfigError,
    InvalidFallbackS3ConfigError,
    MissingRequiredFieldError,
    NodeConfigError,
    RpcChainMismatchError,
    UnsupportedParentChainError,
)
from .generate import generate_and_write_configs, generate_configs
from .node_config import get_disable_blob_reader, prepare_node_config
from .setup_script import prepare_orbit_setup_script_config
from .types import (
    CoreContracts,
    DeploymentResult,
    FallbackS3Config,
    NodeConfigParams,
    ParentChain,
)

try:
    __version__ = version("orbit-node-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "prepare_node_config",
    "prepare_orbit_setup_script_config",
    "prepare_chain_config",
    "parse_chain_config",
    "generate_chain_id",
    "generate_configs",
    "generate_and_write_configs",
    "get_disable_blob_reader",
    "get_parent_chain",
    "get_parent_chain_layer",
    "parent_chain_is_arbitrum",
    "validate_parent_chain",
    "load_environment",
    "DeploymentEnvironment",
    "ParentChainLayer",
    "ParentChain",
    "CoreContracts",
    "DeploymentResult",
    "FallbackS3Config",
    "NodeConfigParams",
    "NodeConfigError",
    "MissingRequiredFieldError",
    "UnsupportedParentChainError",
    "InvalidFallbackS3ConfigError",
    "InvalidChainConfigError",
    "DefectiveDeploymentError",
    "EnvironmentConfigError",
    "RpcChainMismatchError",
]

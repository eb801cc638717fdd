"""Data types and dataclasses for orbit-node-config library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import InvalidFallbackS3ConfigError

# Node configuration document: nested mapping with hyphenated lowercase keys,
# ready for JSON serialization
NodeConfig = Dict[str, Any]

# Parsed Arbitrum chain config record (camelCase keys as stored on chain)
ChainConfig = Dict[str, Any]


@dataclass(frozen=True)
class ParentChain:
    """A supported parent chain and its classification."""

    chain_id: int
    name: str
    layer: int  # 1 = base settlement chain, 2 = rollup
    is_arbitrum: bool
    rpc_url: str  # Public RPC endpoint used when none is configured


@dataclass(frozen=True)
class CoreContracts:
    """Addresses of the rollup core contracts returned by rollup creation."""

    # Required fields
    rollup: str
    inbox: str
    sequencer_inbox: str
    bridge: str
    validator_utils: str
    validator_wallet_creator: str
    deployed_at_block_number: int

    # Optional fields (not every deployment reports them)
    outbox: Optional[str] = None
    rollup_event_inbox: Optional[str] = None
    challenge_manager: Optional[str] = None
    admin_proxy: Optional[str] = None
    upgrade_executor: Optional[str] = None
    native_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the contracts keyed by their camelCase names.

        Optional contracts that were not reported are omitted.
        """
        result: Dict[str, Any] = {
            "rollup": self.rollup,
            "inbox": self.inbox,
            "sequencerInbox": self.sequencer_inbox,
            "bridge": self.bridge,
            "validatorUtils": self.validator_utils,
            "validatorWalletCreator": self.validator_wallet_creator,
            "deployedAtBlockNumber": self.deployed_at_block_number,
        }
        optional = {
            "outbox": self.outbox,
            "rollupEventInbox": self.rollup_event_inbox,
            "challengeManager": self.challenge_manager,
            "adminProxy": self.admin_proxy,
            "upgradeExecutor": self.upgrade_executor,
            "nativeToken": self.native_token,
        }
        result.update({k: v for k, v in optional.items() if v is not None})
        return result


@dataclass(frozen=True)
class FallbackS3Config:
    """Fallback object storage used when Avail posting is unavailable."""

    enable: bool = False

    # Required only when enabled
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: Optional[str] = None
    object_prefix: Optional[str] = None
    bucket: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Names of the storage fields that are absent or empty."""
        fields = {
            "access_key": self.access_key,
            "secret_key": self.secret_key,
            "region": self.region,
            "object_prefix": self.object_prefix,
            "bucket": self.bucket,
        }
        return [name for name, value in fields.items() if not value]

    def validate(self) -> "FallbackS3Config":
        """
        Check that an enabled config carries all five storage fields.

        Returns:
            self, for chaining

        Raises:
            InvalidFallbackS3ConfigError: If enabled and any field is missing
        """
        if self.enable:
            missing = self.missing_fields()
            if missing:
                raise InvalidFallbackS3ConfigError(
                    f"Fallback S3 is enabled but missing: {', '.join(missing)}"
                )
        return self


@dataclass(frozen=True)
class NodeConfigParams:
    """Everything prepare_node_config() needs to derive a node config."""

    # Chain identity
    chain_name: str
    chain_config: ChainConfig
    core_contracts: CoreContracts

    # Operator credentials
    batch_poster_private_key: str
    validator_private_key: str

    # Avail data availability
    avail_address_seed: str
    avail_app_id: int

    # Parent chain
    parent_chain_id: int
    parent_chain_rpc_url: str
    parent_chain_beacon_rpc_url: Optional[str] = None

    # Optional features
    fallback_s3_config: FallbackS3Config = field(default_factory=FallbackS3Config)
    das_server_url: Optional[str] = None


@dataclass(frozen=True)
class DeploymentResult:
    """Outputs of the rollup creation step, as read from disk."""

    chain_config: ChainConfig
    core_contracts: CoreContracts
    deployer: str  # Chain owner and fee receiver
    batch_poster: str
    validator: str

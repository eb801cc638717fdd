"""Configuration constants for orbit-node-config library."""

# Default logger name
LOGGER_NAME = "orbit-node-config"

# Supported parent chains keyed by chain id
# layer: settlement layer of the parent chain itself (1 = base chain, 2 = rollup)
# is_arbitrum: whether the parent chain runs the Arbitrum Nitro stack
PARENT_CHAINS = {
    1: {
        "name": "Ethereum",
        "layer": 1,
        "is_arbitrum": False,
        "rpc_url": "https://cloudflare-eth.com",
    },
    11155111: {
        "name": "Sepolia",
        "layer": 1,
        "is_arbitrum": False,
        "rpc_url": "https://rpc.sepolia.org",
    },
    17000: {
        "name": "Holesky",
        "layer": 1,
        "is_arbitrum": False,
        "rpc_url": "https://ethereum-holesky-rpc.publicnode.com",
    },
    1337: {
        "name": "Nitro Testnode L1",
        "layer": 1,
        "is_arbitrum": False,
        "rpc_url": "http://127.0.0.1:8545",
    },
    42161: {
        "name": "Arbitrum One",
        "layer": 2,
        "is_arbitrum": True,
        "rpc_url": "https://arb1.arbitrum.io/rpc",
    },
    42170: {
        "name": "Arbitrum Nova",
        "layer": 2,
        "is_arbitrum": True,
        "rpc_url": "https://nova.arbitrum.io/rpc",
    },
    421614: {
        "name": "Arbitrum Sepolia",
        "layer": 2,
        "is_arbitrum": True,
        "rpc_url": "https://sepolia-rollup.arbitrum.io/rpc",
    },
    412346: {
        "name": "Nitro Testnode L2",
        "layer": 2,
        "is_arbitrum": True,
        "rpc_url": "http://127.0.0.1:8547",
    },
    8453: {
        "name": "Base",
        "layer": 2,
        "is_arbitrum": False,
        "rpc_url": "https://mainnet.base.org",
    },
    84532: {
        "name": "Base Sepolia",
        "layer": 2,
        "is_arbitrum": False,
        "rpc_url": "https://sepolia.base.org",
    },
}

# Parent chain used when PARENT_CHAIN_ID is not set
DEFAULT_PARENT_CHAIN_ID = 421614

DEFAULT_CHAIN_NAME = "My Orbit Chain"

# Node HTTP API surface
HTTP_ADDR = "0.0.0.0"
HTTP_PORT = 8449
HTTP_API = ["eth", "net", "web3", "arb", "debug"]

# Batch posting and sequencing
BATCH_POSTER_MAX_SIZE = 90000
SEQUENCER_MAX_TX_DATA_SIZE = 85000
SEQUENCER_MAX_BLOCK_SPEED = "250ms"
STAKER_STRATEGY = "MakeNodes"

# Data availability committee
DAS_SERVER_FALLBACK_URL = "http://localhost"
DAS_REST_PORT = 9877
DAS_ASSUMED_HONEST = 1

# Avail data availability layer (Turing testnet)
AVAIL_API_URL = "wss://turing-rpc.avail.so/ws"
AVAIL_TIMEOUT = "100s"
AVAIL_BRIDGE_API_URL = "https://turing-bridge-api.fra.avail.so/"
AVAIL_VECTORX_ADDRESS = "0xA712dfec48AF3a78419A8FF90fE8f97Ae74680F0"
AVAIL_ARBSEPOLIA_RPC = "wss://sepolia-rollup.arbitrum.io/rpc"

# Setup script defaults
MIN_L2_BASE_FEE = 100000000

# Chain config defaults
DEFAULT_INITIAL_ARBOS_VERSION = 32
DEFAULT_MAX_CODE_SIZE = 24576
DEFAULT_MAX_INIT_CODE_SIZE = 49152
CHAIN_ID_RANGE = (10_000_000_000, 99_999_999_999)

# Output file names
NODE_CONFIG_FILENAME = "nodeConfig.json"
SETUP_SCRIPT_CONFIG_FILENAME = "orbitSetupScriptConfig.json"

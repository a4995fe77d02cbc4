from pathlib import Path

import deployment

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]
DEPLOYMENT_DIR = Path(deployment.__file__).parent
PROJECT_ROOT = DEPLOYMENT_DIR.parent
ENV_FILEPATH = PROJECT_ROOT / ".env"

TOKEN_CONTRACT_NAME = "Token1"
DEFAULT_TOKEN_NAME = "sept"
DEFAULT_TOKEN_SYMBOL = "SEPT"
REQUIRED_CONFIRMATIONS = 5

HOODI_NETWORK = "hoodi"
HOODI_EXPLORER_URL = "https://explorer.hoodi.xyz"

TOKEN_NAME_ENV = "TOKEN_NAME"
TOKEN_SYMBOL_ENV = "TOKEN_SYMBOL"
EXPLORER_API_KEY_ENV = "HOODI_EXPLORER_API_KEY"
DEPLOYER_ACCOUNT_ENV = "DEPLOYER_ACCOUNT"
# key variable read by the ape-etherscan explorer plugin
PLUGIN_EXPLORER_API_KEY_ENV = "ETHERSCAN_API_KEY"

SETUP_SCRIPT_COMMAND = "ape run hoodi setup_token --network ethereum:hoodi:node"

from typing import Optional

from ape import accounts
from ape.api import AccountAPI
from eth_utils import from_wei

from deployment.constants import DEPLOYER_ACCOUNT_ENV, LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_account(network_name: str, account_id: Optional[str] = None) -> AccountAPI:
    """Returns the deployer account for the given network."""
    if network_name in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
        return accounts.test_accounts[0]
    if not account_id:
        raise ValueError(
            f"No deployer account for network '{network_name}'; "
            f"set {DEPLOYER_ACCOUNT_ENV} to an ape account alias"
        )
    return accounts.load(account_id)


def format_ether(wei: int) -> str:
    return str(from_wei(wei, "ether"))


def explorer_address_url(explorer_url: str, address: str) -> str:
    return f"{explorer_url.rstrip('/')}/address/{address}"

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ape import networks, project
from ape.api import AccountAPI
from ape.contracts import ContractInstance
from ape.logging import logger

from deployment.utils import get_account


@dataclass(frozen=True)
class NetworkInfo:
    name: str
    chain_id: int
    rpc_url: Optional[str] = None


class ChainClient(ABC):
    """Everything the deployment runner needs from the connected chain."""

    @abstractmethod
    def network_info(self) -> NetworkInfo:
        raise NotImplementedError

    @abstractmethod
    def get_signer(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    def signer_address(self, signer: Any) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_balance(self, address: str) -> int:
        """Native currency balance in wei."""
        raise NotImplementedError

    @abstractmethod
    def deploy(self, signer: Any, *args) -> Any:
        """Submits the contract creation transaction and returns the contract."""
        raise NotImplementedError

    @abstractmethod
    def wait_for_confirmations(self, contract: Any, confirmations: int) -> int:
        """Blocks until the creation transaction has ``confirmations`` blocks on top."""
        raise NotImplementedError

    @abstractmethod
    def contract_address(self, contract: Any) -> str:
        raise NotImplementedError

    @abstractmethod
    def read_attribute(self, contract: Any, attribute: str) -> Any:
        raise NotImplementedError


class ApeChainClient(ChainClient):
    def __init__(self, contract_name: str, account_id: Optional[str] = None):
        self.contract_name = contract_name
        self.account_id = account_id

    @property
    def container(self):
        return getattr(project, self.contract_name)

    def network_info(self) -> NetworkInfo:
        provider = networks.provider
        return NetworkInfo(
            name=provider.network.name,
            chain_id=provider.chain_id,
            rpc_url=getattr(provider, "uri", None),
        )

    def get_signer(self) -> AccountAPI:
        return get_account(networks.provider.network.name, self.account_id)

    def signer_address(self, signer: AccountAPI) -> str:
        return signer.address

    def get_balance(self, address: str) -> int:
        return networks.provider.get_balance(address)

    def deploy(self, signer: AccountAPI, *args) -> ContractInstance:
        # confirmations are awaited separately in wait_for_confirmations
        return self.container.deploy(*args, sender=signer, required_confirmations=0)

    def wait_for_confirmations(self, contract: ContractInstance, confirmations: int) -> int:
        logger.info(f"Waiting for {confirmations} confirmations of {contract.txn_hash}")
        receipt = networks.provider.get_receipt(
            contract.txn_hash, required_confirmations=confirmations
        )
        return receipt.required_confirmations

    def contract_address(self, contract: ContractInstance) -> str:
        return contract.address

    def read_attribute(self, contract: ContractInstance, attribute: str) -> Any:
        return getattr(contract, attribute)()

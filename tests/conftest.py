import pytest

from deployment.chain import ChainClient, NetworkInfo
from deployment.config import DeploymentConfig
from deployment.verify import VerificationResult

SIGNER_ADDRESS = "0x1e59ce931B4CFea3fe4B875411e280e173cB7A9C"
TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


class FakeContract:
    def __init__(self, name, symbol, owner, decimals=18):
        self.attributes = dict(name=name, symbol=symbol, owner=owner, decimals=decimals)


class FakeChainClient(ChainClient):
    def __init__(self, network=None, balance=2 * 10**18, fail_on=None):
        self.network = network or NetworkInfo(
            name="hoodi", chain_id=560048, rpc_url="https://rpc.hoodi.example"
        )
        self.balance = balance
        self.fail_on = fail_on
        self.calls = []

    def _record(self, call, *args):
        self.calls.append((call, *args))
        if call == self.fail_on:
            raise RuntimeError(f"{call} reverted")

    def network_info(self):
        self._record("network_info")
        return self.network

    def get_signer(self):
        self._record("get_signer")
        return SIGNER_ADDRESS

    def signer_address(self, signer):
        return signer

    def get_balance(self, address):
        self._record("get_balance", address)
        return self.balance

    def deploy(self, signer, *args):
        self._record("deploy", signer, *args)
        name, symbol = args
        return FakeContract(name=name, symbol=symbol, owner=signer)

    def wait_for_confirmations(self, contract, confirmations):
        self._record("wait_for_confirmations", confirmations)
        return confirmations

    def contract_address(self, contract):
        return TOKEN_ADDRESS

    def read_attribute(self, contract, attribute):
        self._record("read_attribute", attribute)
        return contract.attributes[attribute]


class FakeVerifier:
    def __init__(self, result=None):
        self.result = result or VerificationResult.success()
        self.calls = []

    def __call__(self, address, constructor_args):
        self.calls.append((address, tuple(constructor_args)))
        return self.result


class Output:
    def __init__(self):
        self.lines = []

    def __call__(self, *args):
        self.lines.append(" ".join(str(a) for a in args))

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def config():
    return DeploymentConfig(token_name="sept", token_symbol="SEPT", explorer_api_key="key")


@pytest.fixture
def client():
    return FakeChainClient()


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def output():
    return Output()

from dataclasses import dataclass
from typing import Callable, Sequence

from ape.logging import logger

from deployment.chain import ChainClient
from deployment.config import DeploymentConfig
from deployment.constants import SETUP_SCRIPT_COMMAND
from deployment.utils import explorer_address_url, format_ether
from deployment.verify import VerificationResult

Verifier = Callable[[str, Sequence], VerificationResult]


@dataclass(frozen=True)
class DeploymentResult:
    """Metadata of a confirmed deployment; ``confirmation_count`` is the number of confirmations waited for."""

    contract_address: str
    deployed_name: str
    deployed_symbol: str
    decimals: int
    owner_address: str
    confirmation_count: int


class DeploymentRunner:
    """
    Deploys the token contract, waits for it to be confirmed and reports on it.

    Any failure before verification propagates to the caller. Verification is
    best effort: its failures are logged and the run carries on.
    """

    def __init__(
        self,
        config: DeploymentConfig,
        client: ChainClient,
        verifier: Verifier,
        echo: Callable[..., None] = print,
    ):
        self.config = config
        self.client = client
        self.verifier = verifier
        self.echo = echo

    def run(self) -> DeploymentResult:
        network = self.client.network_info()
        self.echo(f"Deploying {self.config.token_symbol} token to {network.name} network...")
        self.echo("Network:", network.name)
        self.echo("Chain ID:", network.chain_id)

        signer = self.client.get_signer()
        signer_address = self.client.signer_address(signer)
        self.echo("Deploying contracts with account:", signer_address)
        balance = self.client.get_balance(signer_address)
        self.echo("Account balance:", format_ether(balance), "ETH")

        contract = self.client.deploy(signer, *self.config.constructor_args)
        address = self.client.contract_address(contract)

        self.echo("\nWaiting for block confirmations...")
        confirmations = self.client.wait_for_confirmations(
            contract, self.config.confirmations
        )

        result = DeploymentResult(
            contract_address=address,
            deployed_name=self.client.read_attribute(contract, "name"),
            deployed_symbol=self.client.read_attribute(contract, "symbol"),
            decimals=int(self.client.read_attribute(contract, "decimals")),
            owner_address=self.client.read_attribute(contract, "owner"),
            confirmation_count=confirmations,
        )
        self._report_deployment(result)

        if self.config.should_verify(network.name):
            self._verify(result)
        else:
            logger.info(f"Skipping explorer verification on network '{network.name}'")

        self._report_summary(result, network)
        return result

    def _verify(self, result: DeploymentResult) -> VerificationResult:
        self.echo(f"Attempting to verify contract on {self.config.verify_network} explorer...")
        verification = self.verifier(result.contract_address, self.config.constructor_args)
        if verification.verified:
            self.echo(f"Contract verified on {self.config.verify_network} explorer!")
        else:
            logger.warning(f"Verification of {result.contract_address} failed: {verification.error}")
            self.echo("Verification not available or failed:", verification.error)
        return verification

    def _report_deployment(self, result: DeploymentResult) -> None:
        self.echo("\n=== DEPLOYMENT SUCCESSFUL ===")
        self.echo(f"{result.deployed_symbol} Token deployed to:", result.contract_address)
        self.echo("Token name:", result.deployed_name)
        self.echo("Token symbol:", result.deployed_symbol)
        self.echo("Token decimals:", result.decimals)
        self.echo("Owner:", result.owner_address)

    def _report_summary(self, result: DeploymentResult, network) -> None:
        self.echo("\n=== NETWORK INFO ===")
        self.echo("Network Name:", network.name)
        self.echo("Chain ID:", network.chain_id)
        self.echo("RPC URL:", network.rpc_url)

        self.echo("\n=== NEXT STEPS ===")
        self.echo("1. Save the contract address:", result.contract_address)
        self.echo("2. Add it to your frontend configuration")
        self.echo(f"3. Run setup script to configure operators: {SETUP_SCRIPT_COMMAND}")
        self.echo("4. Fund the contract with initial fiat backing")

        self.echo("\n=== CONTRACT INTERACTION ===")
        self.echo(
            "View on explorer:",
            explorer_address_url(self.config.explorer_url, result.contract_address),
        )
        self.echo("Add to MetaMask:")
        self.echo("- Token Address:", result.contract_address)
        self.echo("- Token Symbol:", result.deployed_symbol)
        self.echo("- Token Decimals:", result.decimals)

from dataclasses import dataclass
from typing import Optional, Sequence

from ape import networks


@dataclass(frozen=True)
class VerificationResult:
    verified: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "VerificationResult":
        return cls(verified=True)

    @classmethod
    def failure(cls, error: str) -> "VerificationResult":
        return cls(verified=False, error=error)


class ExplorerVerifier:
    """Publishes contract sources to the block explorer of the connected network."""

    def __call__(self, address: str, constructor_args: Sequence) -> VerificationResult:
        # the explorer plugin recovers constructor arguments from the creation transaction
        try:
            network = networks.provider.network
            explorer = network.explorer
            if explorer is None:
                return VerificationResult.failure(
                    f"No explorer configured for network '{network.name}'"
                )
            explorer.publish_contract(address)
        except Exception as e:
            return VerificationResult.failure(str(e))
        return VerificationResult.success()

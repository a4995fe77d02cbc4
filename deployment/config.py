import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from dotenv import load_dotenv

from deployment.constants import (
    DEFAULT_TOKEN_NAME,
    DEFAULT_TOKEN_SYMBOL,
    DEPLOYER_ACCOUNT_ENV,
    ENV_FILEPATH,
    EXPLORER_API_KEY_ENV,
    HOODI_EXPLORER_URL,
    HOODI_NETWORK,
    PLUGIN_EXPLORER_API_KEY_ENV,
    REQUIRED_CONFIRMATIONS,
    TOKEN_CONTRACT_NAME,
    TOKEN_NAME_ENV,
    TOKEN_SYMBOL_ENV,
)


@dataclass(frozen=True)
class DeploymentConfig:
    """Inputs of a single token deployment, read once at startup."""

    token_name: str = DEFAULT_TOKEN_NAME
    token_symbol: str = DEFAULT_TOKEN_SYMBOL
    explorer_api_key: Optional[str] = None
    account_id: Optional[str] = None
    contract_name: str = TOKEN_CONTRACT_NAME
    confirmations: int = REQUIRED_CONFIRMATIONS
    verify_network: str = HOODI_NETWORK
    explorer_url: str = HOODI_EXPLORER_URL

    @property
    def constructor_args(self):
        return self.token_name, self.token_symbol

    def should_verify(self, network_name: str) -> bool:
        return network_name == self.verify_network and bool(self.explorer_api_key)

    def export_explorer_api_key(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        """Hands the explorer API key to the explorer plugin unless it already has one."""
        if environ is None:
            environ = os.environ
        if self.explorer_api_key and not environ.get(PLUGIN_EXPLORER_API_KEY_ENV):
            environ[PLUGIN_EXPLORER_API_KEY_ENV] = self.explorer_api_key

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides
    ) -> "DeploymentConfig":
        if environ is None:
            environ = os.environ
        params = dict(
            # empty values fall back to the defaults as well
            token_name=environ.get(TOKEN_NAME_ENV) or DEFAULT_TOKEN_NAME,
            token_symbol=environ.get(TOKEN_SYMBOL_ENV) or DEFAULT_TOKEN_SYMBOL,
            explorer_api_key=environ.get(EXPLORER_API_KEY_ENV) or None,
            account_id=environ.get(DEPLOYER_ACCOUNT_ENV) or None,
        )
        params.update(overrides)
        return cls(**params)

    @classmethod
    def load(cls, env_filepath: Path = ENV_FILEPATH, **overrides) -> "DeploymentConfig":
        """Reads the process environment after merging a ``.env`` file into it."""
        load_dotenv(dotenv_path=env_filepath, override=False)
        return cls.from_env(**overrides)

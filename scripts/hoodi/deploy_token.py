#!/usr/bin/python3

from deployment.chain import ApeChainClient
from deployment.config import DeploymentConfig
from deployment.runner import DeploymentRunner
from deployment.verify import ExplorerVerifier


def main():
    config = DeploymentConfig.load()
    config.export_explorer_api_key()
    client = ApeChainClient(contract_name=config.contract_name, account_id=config.account_id)
    runner = DeploymentRunner(config=config, client=client, verifier=ExplorerVerifier())
    return runner.run()

#!/usr/bin/env python3
"""
Universal Router deployment CLI.

Usage:
    deploy-universal-router \\
        --rpc-url <RPC_URL> --chain-name <CHAIN_NAME> \\
        --weth9 <ADDR> --v3-factory <ADDR> --v3-position-manager <ADDR> \\
        [--v2-factory <ADDR>] [--permit2 <ADDR>] \\
        [--v4-pool-manager <ADDR>] [--v4-position-manager <ADDR>]

Environment Variables Required:
    - PRIVATE_KEY: Deployer private key (may be set in ./.env)
"""
from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

from universal_router_deploy.config.cli import DeploymentConfig, parse_arguments
from universal_router_deploy.config.logging_config import DeploymentLogger
from universal_router_deploy.helpers.addresses import validate_config_addresses
from universal_router_deploy.helpers.web3_setup import connect_chain
from universal_router_deploy.setup.deploy_universal_router import DeploymentContext, run_deployment


def deploy(config: DeploymentConfig, logger: DeploymentLogger) -> None:
    logger.info(f"Starting Universal Router deployment on {config.chain_name}")
    logger.info(f"RPC URL: {config.rpc_url}")

    validate_config_addresses(config)

    client = connect_chain(config.rpc_url)
    logger.info(f"Deploying from address: {client.address}")

    balance = client.get_balance()
    logger.info(f"Account balance: {client.format_balance(balance)} ETH")
    client.ensure_funded(balance)

    run_deployment(DeploymentContext(config=config, logger=logger, client=client))


def main(argv: list[str] | None = None) -> int:
    # only the working directory's .env, never a parent's
    load_dotenv(Path.cwd() / ".env", override=False)

    try:
        config = parse_arguments(argv)
        logger = DeploymentLogger(config.chain_name)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    with logger:
        try:
            deploy(config, logger)
        except Exception as e:
            logger.error("Deployment failed", e)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Deploy UnsupportedProtocol and UniversalRouter from pre-built Forge artifacts.

This script assumes you've already run:
    forge build

Usage:
    python scripts/deploy_universal_router.py \
        --rpc-url <RPC_URL> --chain-name <CHAIN_NAME> \
        --weth9 <ADDR> --v3-factory <ADDR> --v3-position-manager <ADDR>
"""

from universal_router_deploy.setup.cli import main


if __name__ == "__main__":
    raise SystemExit(main())

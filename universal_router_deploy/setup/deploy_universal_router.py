"""
Deploy UnsupportedProtocol and UniversalRouter
==============================================

Two blocking steps, always in this order:

1. ``UnsupportedProtocol`` (no constructor arguments). Every call into it
   reverts, so its address is used in place of any protocol the chain does
   not have.
2. ``UniversalRouter`` with a ``RouterParameters`` struct in which every
   zero address has been replaced by the UnsupportedProtocol address.

There is no retry or rollback: if step 2 fails, step 1 stays deployed.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator

from eth_utils import to_bytes, to_checksum_address

from universal_router_deploy.config.cli import DeploymentConfig
from universal_router_deploy.config.constants import (
    UNIVERSAL_ROUTER,
    UNSUPPORTED_PROTOCOL,
    V2_INIT_CODE_HASH,
    V3_INIT_CODE_HASH,
    ZERO_ADDRESS,
)
from universal_router_deploy.config.logging_config import DeploymentLogger
from universal_router_deploy.helpers.addresses import map_unsupported_address
from universal_router_deploy.helpers.artifacts import load_forge_artifact
from universal_router_deploy.helpers.web3_setup import ChainClient, DeploymentResult


# --------------------------------------------------------------------------- #
# Router parameters                                                           #
# --------------------------------------------------------------------------- #

# RouterParameters field -> (Solidity struct member, DeploymentConfig attribute)
ROUTER_ADDRESS_FIELDS: dict[str, tuple[str, str]] = {
    "permit2": ("permit2", "permit2_address"),
    "weth9": ("weth9", "weth9_address"),
    "v2_factory": ("v2Factory", "v2_factory_address"),
    "v3_factory": ("v3Factory", "v3_factory_address"),
    "v4_pool_manager": ("v4PoolManager", "v4_pool_manager_address"),
    "v3_nft_position_manager": ("v3NFTPositionManager", "v3_position_manager_address"),
    "v4_position_manager": ("v4PositionManager", "v4_position_manager_address"),
}

ROUTER_HASH_FIELDS: dict[str, str] = {
    "pair_init_code_hash": "pairInitCodeHash",
    "pool_init_code_hash": "poolInitCodeHash",
}


@dataclass(frozen=True)
class RouterParameters:
    """Constructor argument of UniversalRouter, in Solidity struct order."""

    permit2: str
    weth9: str
    v2_factory: str
    v3_factory: str
    pair_init_code_hash: str
    pool_init_code_hash: str
    v4_pool_manager: str
    v3_nft_position_manager: str
    v4_position_manager: str

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(solidity_name, value)`` pairs in struct order."""
        for f in fields(self):
            if f.name in ROUTER_HASH_FIELDS:
                solidity_name = ROUTER_HASH_FIELDS[f.name]
            else:
                solidity_name = ROUTER_ADDRESS_FIELDS[f.name][0]
            yield solidity_name, getattr(self, f.name)

    def as_struct(self) -> tuple:
        """ABI-ready tuple: checksummed addresses and 32-byte hashes."""
        values = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in ROUTER_HASH_FIELDS:
                values.append(to_bytes(hexstr=value))
            else:
                values.append(to_checksum_address(value))
        return tuple(values)


def build_router_parameters(config: DeploymentConfig, unsupported_address: str) -> RouterParameters:
    addresses = {
        name: map_unsupported_address(getattr(config, attr), unsupported_address)
        for name, (_, attr) in ROUTER_ADDRESS_FIELDS.items()
    }
    return RouterParameters(
        pair_init_code_hash=V2_INIT_CODE_HASH,
        pool_init_code_hash=V3_INIT_CODE_HASH,
        **addresses,
    )


# --------------------------------------------------------------------------- #
# Deployment steps                                                            #
# --------------------------------------------------------------------------- #

@dataclass
class DeploymentContext:
    """Everything a deployment step needs for the current run."""
    config: DeploymentConfig
    logger: DeploymentLogger
    client: ChainClient


def deploy_unsupported_protocol(ctx: DeploymentContext) -> DeploymentResult:
    ctx.logger.step(1, f"Deploying {UNSUPPORTED_PROTOCOL} contract")

    artifact = load_forge_artifact(UNSUPPORTED_PROTOCOL)
    result = ctx.client.deploy(UNSUPPORTED_PROTOCOL, artifact)

    ctx.logger.deployment(UNSUPPORTED_PROTOCOL, result.address, result.tx_hash)
    return result


def deploy_universal_router(ctx: DeploymentContext, unsupported_address: str) -> DeploymentResult:
    ctx.logger.step(2, f"Deploying {UNIVERSAL_ROUTER} contract")

    for solidity_name, attr in ROUTER_ADDRESS_FIELDS.values():
        if getattr(ctx.config, attr) == ZERO_ADDRESS:
            ctx.logger.warn(f"{solidity_name} not configured, routing to {UNSUPPORTED_PROTOCOL} at {unsupported_address}")

    params = build_router_parameters(ctx.config, unsupported_address)

    ctx.logger.info("Router Parameters:")
    for solidity_name, value in params.items():
        ctx.logger.info(f"  {solidity_name}: {value}")

    artifact = load_forge_artifact(UNIVERSAL_ROUTER)
    result = ctx.client.deploy(UNIVERSAL_ROUTER, artifact, params.as_struct())

    ctx.logger.deployment(UNIVERSAL_ROUTER, result.address, result.tx_hash)
    ctx.logger.info(f"{UNIVERSAL_ROUTER} deployed in block: {result.block_number}")
    return result


def run_deployment(ctx: DeploymentContext) -> tuple[DeploymentResult, DeploymentResult]:
    """Run both steps and log the summary block."""
    unsupported = deploy_unsupported_protocol(ctx)
    router = deploy_universal_router(ctx, unsupported.address)

    ctx.logger.summary({
        UNSUPPORTED_PROTOCOL: unsupported.address,
        UNIVERSAL_ROUTER: f"{router.address} (block: {router.block_number})",
    })
    return unsupported, router

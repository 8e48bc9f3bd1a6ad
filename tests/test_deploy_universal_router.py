"""Tests for router parameter assembly and the two-step deployment sequence."""

import dataclasses
from pathlib import Path

import pytest
from eth_utils import to_checksum_address

from universal_router_deploy.config.cli import parse_arguments
from universal_router_deploy.config.constants import (
    CANONICAL_PERMIT2_ADDRESS,
    V2_INIT_CODE_HASH,
    V3_INIT_CODE_HASH,
    ZERO_ADDRESS,
)
from universal_router_deploy.config.logging_config import DeploymentLogger
from universal_router_deploy.exceptions import ArtifactError
from universal_router_deploy.setup.deploy_universal_router import (
    DeploymentContext,
    build_router_parameters,
    deploy_universal_router,
    deploy_unsupported_protocol,
    run_deployment,
)

from conftest import V3_FACTORY, V3_POSITION_MANAGER, WETH9, FakeChainClient

FALLBACK = "0x00000000000000000000000000000000000000F1"
V2_FACTORY = "0xAbC0000000000000000000000000000000000123"


@pytest.fixture
def config(required_args):
    return parse_arguments(required_args)


@pytest.fixture
def ctx(project_dir: Path, config, fake_client):
    with DeploymentLogger(config.chain_name) as logger:
        yield DeploymentContext(config=config, logger=logger, client=fake_client)


class TestBuildRouterParameters:
    def test_defaults_route_to_fallback(self, config):
        params = build_router_parameters(config, FALLBACK)

        assert params.permit2 == CANONICAL_PERMIT2_ADDRESS
        assert params.weth9 == WETH9
        assert params.v2_factory == FALLBACK
        assert params.v3_factory == V3_FACTORY
        assert params.pair_init_code_hash == V2_INIT_CODE_HASH
        assert params.pool_init_code_hash == V3_INIT_CODE_HASH
        assert params.v4_pool_manager == FALLBACK
        assert params.v3_nft_position_manager == V3_POSITION_MANAGER
        assert params.v4_position_manager == FALLBACK

    def test_provided_v2_factory_is_kept_exactly(self, required_args):
        config = parse_arguments(required_args + ["--v2-factory", V2_FACTORY])
        params = build_router_parameters(config, FALLBACK)
        assert params.v2_factory == V2_FACTORY

    def test_zero_permit2_is_substituted(self, config):
        config = dataclasses.replace(config, permit2_address=ZERO_ADDRESS)
        assert build_router_parameters(config, FALLBACK).permit2 == FALLBACK

    def test_no_zero_addresses_remain(self, config):
        params = build_router_parameters(config, FALLBACK)
        assert ZERO_ADDRESS not in {value for _, value in params.items()}

    def test_items_in_struct_order(self, config):
        names = [name for name, _ in build_router_parameters(config, FALLBACK).items()]
        assert names == [
            "permit2",
            "weth9",
            "v2Factory",
            "v3Factory",
            "pairInitCodeHash",
            "poolInitCodeHash",
            "v4PoolManager",
            "v3NFTPositionManager",
            "v4PositionManager",
        ]

    def test_as_struct_is_abi_ready(self, required_args):
        config = parse_arguments(required_args + ["--v2-factory", V2_FACTORY.lower()])
        struct = build_router_parameters(config, FALLBACK).as_struct()

        assert len(struct) == 9
        assert struct[0] == CANONICAL_PERMIT2_ADDRESS
        assert struct[2] == to_checksum_address(V2_FACTORY)
        assert struct[4] == bytes.fromhex(V2_INIT_CODE_HASH[2:])
        assert struct[5] == bytes.fromhex(V3_INIT_CODE_HASH[2:])
        assert all(len(h) == 32 for h in struct[4:6])
        assert struct[6] == to_checksum_address(FALLBACK)


class TestSteps:
    def test_unsupported_protocol_has_no_constructor_args(self, ctx, fake_client):
        result = deploy_unsupported_protocol(ctx)

        name, artifact, args = fake_client.deployments[0]
        assert name == "UnsupportedProtocol"
        assert args == ()
        assert artifact.bytecode == "0x6080604052"
        assert result.address == "0x" + "0" * 39 + "1"

    def test_router_receives_struct(self, ctx, fake_client):
        deploy_universal_router(ctx, FALLBACK)

        name, _, args = fake_client.deployments[0]
        assert name == "UniversalRouter"
        assert len(args) == 1
        assert args[0] == build_router_parameters(ctx.config, FALLBACK).as_struct()

    def test_router_logs_parameters_and_block(self, ctx, project_dir):
        deploy_universal_router(ctx, FALLBACK)

        content = (project_dir / "logs" / "testchain.log").read_text()
        assert "[STEP] 2: Deploying UniversalRouter contract" in content
        assert f"  v2Factory: {FALLBACK}" in content
        assert f"  pairInitCodeHash: {V2_INIT_CODE_HASH}" in content
        assert "UniversalRouter deployed in block: 1001" in content

    def test_router_warns_about_substituted_addresses(self, ctx, project_dir):
        deploy_universal_router(ctx, FALLBACK)

        content = (project_dir / "logs" / "testchain.log").read_text()
        assert content.count("[WARN]") == 3
        assert f"[WARN] v2Factory not configured, routing to UnsupportedProtocol at {FALLBACK}" in content

    def test_missing_router_artifact_leaves_first_deployment(self, ctx, fake_client, project_dir):
        (project_dir / "out" / "UniversalRouter.sol" / "UniversalRouter.json").unlink()

        with pytest.raises(ArtifactError):
            run_deployment(ctx)
        assert [d[0] for d in fake_client.deployments] == ["UnsupportedProtocol"]


class TestRunDeployment:
    def test_fallback_is_first_deployment(self, ctx, fake_client):
        unsupported, router = run_deployment(ctx)

        assert [d[0] for d in fake_client.deployments] == ["UnsupportedProtocol", "UniversalRouter"]
        struct = fake_client.deployments[1][2][0]
        assert struct[2] == to_checksum_address(unsupported.address)
        assert router.block_number == 1002

    def test_summary_lists_both_contracts(self, ctx, project_dir):
        unsupported, router = run_deployment(ctx)

        content = (project_dir / "logs" / "testchain.log").read_text()
        assert f"[SUCCESS] UnsupportedProtocol: {unsupported.address}" in content
        assert f"[SUCCESS] UniversalRouter: {router.address} (block: {router.block_number})" in content
        assert content.index("UnsupportedProtocol: ") < content.index("UniversalRouter: ")

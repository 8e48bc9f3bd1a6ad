"""Shared pytest fixtures for universal-router-deploy tests."""

import json
from pathlib import Path
from typing import Any, Callable, List
from unittest.mock import MagicMock

import pytest

from universal_router_deploy.config.constants import UNIVERSAL_ROUTER, UNSUPPORTED_PROTOCOL
from universal_router_deploy.helpers.artifacts import ContractArtifact
from universal_router_deploy.helpers.web3_setup import ChainClient, DeploymentResult

WETH9 = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
V3_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
V3_POSITION_MANAGER = "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"
DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

# Well-known first Anvil/Hardhat dev key, controls DEPLOYER
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


class FakeChainClient(ChainClient):
    """ChainClient that records deployments instead of talking to a node."""

    def __init__(self, balance: int = 10**18):
        super().__init__(w3=MagicMock(), account=MagicMock(address=DEPLOYER))
        self.balance = balance
        self.deployments: List[tuple] = []

    def get_balance(self) -> int:
        return self.balance

    def deploy(self, contract_name: str, artifact: ContractArtifact, *constructor_args: Any) -> DeploymentResult:
        self.deployments.append((contract_name, artifact, constructor_args))
        n = len(self.deployments)
        return DeploymentResult(
            contract_name=contract_name,
            address=f"0x{n:040x}",
            tx_hash=f"0x{n:064x}",
            block_number=1000 + n,
        )


@pytest.fixture
def required_args() -> List[str]:
    """Return the minimal valid command line."""
    return [
        "--rpc-url", "http://localhost:8545",
        "--chain-name", "testchain",
        "--weth9", WETH9,
        "--v3-factory", V3_FACTORY,
        "--v3-position-manager", V3_POSITION_MANAGER,
    ]


@pytest.fixture
def write_artifact() -> Callable[..., Path]:
    """Return a helper that writes a forge-style artifact under ``root/out``."""

    def _write(root: Path, name: str, payload: Any = None) -> Path:
        if payload is None:
            payload = {
                "abi": [{"type": "constructor", "inputs": [], "stateMutability": "nonpayable"}],
                "bytecode": {"object": "0x6080604052", "sourceMap": ""},
            }
        path = root / "out" / f"{name}.sol" / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, str):
            path.write_text(payload)
        else:
            path.write_text(json.dumps(payload))
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch, write_artifact) -> Path:
    """Chdir into a temporary project containing both contract artifacts."""
    write_artifact(tmp_path, UNSUPPORTED_PROTOCOL)
    write_artifact(tmp_path, UNIVERSAL_ROUTER)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_client() -> FakeChainClient:
    return FakeChainClient()

"""
Load compiled contracts from the Forge output directory.

Forge writes one JSON file per contract at ``out/<Name>.sol/<Name>.json``
holding (among other things) ``abi`` and ``bytecode.object``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from universal_router_deploy.config.constants import FORGE_OUT_DIR
from universal_router_deploy.exceptions import ArtifactError


@dataclass(frozen=True)
class ContractArtifact:
    """ABI and creation bytecode of a compiled contract."""
    abi: list[dict[str, Any]]
    bytecode: str


def artifact_path(contract_name: str, root: Path | None = None) -> Path:
    base = Path(root) if root is not None else Path.cwd()
    return base / FORGE_OUT_DIR / f"{contract_name}.sol" / f"{contract_name}.json"


def load_forge_artifact(contract_name: str, root: Path | None = None) -> ContractArtifact:
    """
    Read the Forge artifact for ``contract_name``.

    Args:
        contract_name: Solidity contract name, e.g. ``"UniversalRouter"``
        root: Project root holding ``out/``; defaults to the working directory

    Raises:
        ArtifactError: if the file is missing, is not JSON or lacks ``abi`` /
            ``bytecode.object``
    """
    path = artifact_path(contract_name, root)
    try:
        with open(path) as f:
            artifact = json.load(f)
    except FileNotFoundError as e:
        raise ArtifactError(f"Artifact not found for {contract_name}: {path} (run `forge build` first)") from e
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Malformed artifact for {contract_name}: {path}: {e}") from e

    try:
        abi = artifact["abi"]
        bytecode = artifact["bytecode"]["object"]
    except (KeyError, TypeError) as e:
        raise ArtifactError(f"Artifact for {contract_name} is missing abi or bytecode.object: {path}") from e

    return ContractArtifact(abi=abi, bytecode=bytecode)

"""
Web3 setup helper - JSON-RPC connection plus local signing identity.

Public API
----------
connect_chain(rpc_url, private_key=None)
    Return a ChainClient for ``rpc_url`` signing with ``private_key`` or
    the PRIVATE_KEY environment variable.
ChainClient.deploy(contract_name, artifact, *constructor_args)
    Sign, send and wait for a contract creation transaction.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from universal_router_deploy.config.constants import PRIVATE_KEY_ENV
from universal_router_deploy.exceptions import (
    InsufficientBalanceError,
    MissingEnvironmentError,
    TransactionFailedError,
)
from universal_router_deploy.helpers.artifacts import ContractArtifact

__all__ = ["ChainClient", "DeploymentResult", "connect_chain"]


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a mined contract creation."""
    contract_name: str
    address: str
    tx_hash: str
    block_number: int


class ChainClient:
    """Thin wrapper pairing a Web3 connection with the deployer account."""

    def __init__(self, w3: Web3, account: LocalAccount):
        self.w3 = w3
        self.account = account

    @property
    def address(self) -> str:
        return self.account.address

    def get_balance(self) -> int:
        """Native-token balance of the deployer, in wei."""
        return self.w3.eth.get_balance(self.address)

    @staticmethod
    def format_balance(balance_wei: int) -> Decimal:
        return Web3.from_wei(balance_wei, "ether")

    def ensure_funded(self, balance_wei: int | None = None) -> int:
        """
        Fail if the deployer cannot pay for gas.

        Args:
            balance_wei: Already-fetched balance; queried from the node when omitted

        Returns:
            The balance in wei

        Raises:
            InsufficientBalanceError: If the balance is exactly zero
        """
        if balance_wei is None:
            balance_wei = self.get_balance()
        if balance_wei == 0:
            raise InsufficientBalanceError("Deployer account has no balance")
        return balance_wei

    def deploy(self, contract_name: str, artifact: ContractArtifact, *constructor_args: Any) -> DeploymentResult:
        """
        Deploy ``artifact`` and block until the creation receipt is available.

        Gas and fee fields are left to web3's transaction builder.

        Raises:
            TransactionFailedError: If the creation transaction reverted
        """
        factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        tx = factory.constructor(*constructor_args).build_transaction({
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "chainId": self.w3.eth.chain_id,
        })

        signed = self.account.sign_transaction(tx)
        raw = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
        tx_hash = Web3.to_hex(self.w3.eth.send_raw_transaction(raw))

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt["status"] != 1:
            raise TransactionFailedError(f"{contract_name} deployment reverted (tx: {tx_hash})")

        return DeploymentResult(
            contract_name=contract_name,
            address=receipt["contractAddress"],
            tx_hash=tx_hash,
            block_number=receipt["blockNumber"],
        )


def connect_chain(rpc_url: str, private_key: str | None = None) -> ChainClient:
    """
    Build a ChainClient for ``rpc_url``.

    Args:
        rpc_url: HTTP JSON-RPC endpoint
        private_key: Hex deployer key. If not provided, uses the PRIVATE_KEY env var.

    Raises:
        MissingEnvironmentError: If no key is available. Checked before any
            connection is made.
    """
    if private_key is None:
        private_key = os.getenv(PRIVATE_KEY_ENV)
    if not private_key:
        raise MissingEnvironmentError(f"{PRIVATE_KEY_ENV} environment variable is required")

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    # PoA chains return oversized extraData in block headers
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    account = Account.from_key(private_key)
    return ChainClient(w3, account)

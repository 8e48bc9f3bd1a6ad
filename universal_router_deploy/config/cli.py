"""Command-line parsing for the Universal Router deployment.

Turns the flat ``--flag value`` argument list into an immutable
:class:`DeploymentConfig`. Address syntax is checked separately by
:mod:`universal_router_deploy.helpers.addresses` once the run logger exists.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from universal_router_deploy.config.constants import CANONICAL_PERMIT2_ADDRESS, ZERO_ADDRESS
from universal_router_deploy.exceptions import ArgumentError

# Below this many raw arguments the five required flags cannot all be present
MIN_ARGUMENTS = 5

REQUIRED_FIELDS = (
    "rpc_url",
    "chain_name",
    "weth9_address",
    "v3_factory_address",
    "v3_position_manager_address",
)


@dataclass(frozen=True)
class DeploymentConfig:
    """Configuration for one deployment run."""

    rpc_url: str
    chain_name: str
    weth9_address: str
    v3_factory_address: str
    v3_position_manager_address: str
    v2_factory_address: str = ZERO_ADDRESS
    permit2_address: str = CANONICAL_PERMIT2_ADDRESS
    v4_pool_manager_address: str = ZERO_ADDRESS
    v4_position_manager_address: str = ZERO_ADDRESS


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting with status 2."""

    def error(self, message: str):
        raise ArgumentError(message)


def _flag_value(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("Missing value")
    return value


def _pair_flags(argv: list[str]) -> list[str]:
    """Join strict ``--flag value`` pairs into ``--flag=value`` tokens.

    The joined form lets argparse accept values that begin with ``-``, and
    rejects ``--flag=value`` written by the caller as an unknown flag.
    """
    paired = []
    for i in range(0, len(argv), 2):
        flag = argv[i]
        if not flag.startswith("--") or "=" in flag:
            raise ArgumentError(f"Unknown flag: {flag}")
        if i + 1 == len(argv):
            raise ArgumentError(f"Missing value for flag: {flag}")
        paired.append(f"{flag}={argv[i + 1]}")
    return paired


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog="deploy-universal-router",
        description="Deploy UnsupportedProtocol and UniversalRouter to an EVM chain",
        add_help=False,
        allow_abbrev=False,
    )

    required = parser.add_argument_group("Required")
    required.add_argument("--rpc-url", dest="rpc_url", type=_flag_value, metavar="RPC_URL", help="RPC endpoint URL")
    required.add_argument("--chain-name", dest="chain_name", type=_flag_value, metavar="CHAIN_NAME", help="Chain name for logging")
    required.add_argument("--weth9", dest="weth9_address", type=_flag_value, metavar="WETH9_ADDRESS", help="WETH9 contract address")
    required.add_argument("--v3-factory", dest="v3_factory_address", type=_flag_value, metavar="V3_FACTORY_ADDRESS", help="Uniswap V3 factory address")
    required.add_argument(
        "--v3-position-manager",
        dest="v3_position_manager_address",
        type=_flag_value,
        metavar="V3_POSITION_MANAGER_ADDRESS",
        help="V3 NFT position manager address",
    )

    optional = parser.add_argument_group("Optional")
    optional.add_argument(
        "--v2-factory",
        dest="v2_factory_address",
        type=_flag_value,
        default=ZERO_ADDRESS,
        metavar="V2_FACTORY_ADDRESS",
        help="V2 factory address (defaults to 0x0)",
    )
    optional.add_argument(
        "--permit2",
        dest="permit2_address",
        type=_flag_value,
        default=CANONICAL_PERMIT2_ADDRESS,
        metavar="PERMIT2_ADDRESS",
        help=f"Permit2 address (defaults to canonical: {CANONICAL_PERMIT2_ADDRESS})",
    )
    optional.add_argument(
        "--v4-pool-manager",
        dest="v4_pool_manager_address",
        type=_flag_value,
        default=ZERO_ADDRESS,
        metavar="V4_POOL_MANAGER_ADDRESS",
        help="V4 pool manager address (defaults to 0x0)",
    )
    optional.add_argument(
        "--v4-position-manager",
        dest="v4_position_manager_address",
        type=_flag_value,
        default=ZERO_ADDRESS,
        metavar="V4_POSITION_MANAGER_ADDRESS",
        help="V4 position manager address (defaults to 0x0)",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> DeploymentConfig:
    """Parse deployment flags into a :class:`DeploymentConfig`.

    Args:
        argv: Argument list without the program name. Defaults to ``sys.argv[1:]``.

    Returns:
        The parsed configuration, with defaults applied to omitted optional addresses.

    Raises:
        ArgumentError: On an unknown flag, a flag without a value, or a missing
            required parameter.
        SystemExit: With status 1 (after printing usage) when fewer than five
            arguments are given.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    if len(argv) < MIN_ARGUMENTS:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args, unknown = parser.parse_known_args(_pair_flags(argv))
    if unknown:
        raise ArgumentError(f"Unknown flag: {unknown[0].split('=', 1)[0]}")

    for field in REQUIRED_FIELDS:
        if getattr(args, field) is None:
            raise ArgumentError(f"Missing required parameter: {field}")

    return DeploymentConfig(**vars(args))

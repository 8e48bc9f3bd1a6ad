"""
Address helpers - syntax validation and zero-address substitution.

Public API
----------
validate_address(address, name)
    Raise InvalidAddressError unless ``address`` is 0x + 40 hex digits.
validate_config_addresses(config)
    Validate every address of a DeploymentConfig; unset optionals are skipped.
map_unsupported_address(address, unsupported_address)
    Route the zero-address sentinel to the UnsupportedProtocol contract.
"""
from __future__ import annotations

from eth_utils import is_hex_address

from universal_router_deploy.config.cli import DeploymentConfig
from universal_router_deploy.config.constants import ZERO_ADDRESS
from universal_router_deploy.exceptions import InvalidAddressError

__all__ = ["validate_address", "validate_config_addresses", "map_unsupported_address"]


def validate_address(address: str, name: str) -> None:
    """
    Check that ``address`` is a 20-byte hex address.

    Letter case is not checked, so lower-case, upper-case and mixed-case
    addresses are accepted alike.

    Raises:
        InvalidAddressError: naming ``name`` and the offending value
    """
    if not (isinstance(address, str) and address.startswith("0x") and is_hex_address(address)):
        raise InvalidAddressError(f"Invalid address for {name}: {address}")


def validate_config_addresses(config: DeploymentConfig) -> None:
    validate_address(config.weth9_address, "WETH9")
    validate_address(config.v3_factory_address, "V3 Factory")
    validate_address(config.v3_position_manager_address, "V3 Position Manager")
    validate_address(config.permit2_address, "Permit2")

    # Zero means "not deployed on this chain"
    optional = (
        (config.v2_factory_address, "V2 Factory"),
        (config.v4_pool_manager_address, "V4 Pool Manager"),
        (config.v4_position_manager_address, "V4 Position Manager"),
    )
    for address, name in optional:
        if address != ZERO_ADDRESS:
            validate_address(address, name)


def map_unsupported_address(address: str, unsupported_address: str) -> str:
    return unsupported_address if address == ZERO_ADDRESS else address

"""
Addresses, hashes and filesystem locations used by the router deployment.

The init code hashes are the standard Uniswap V2 pair / V3 pool hashes and
are identical on every chain the router is deployed to.
"""

from pathlib import Path

# =============================================================================
# ADDRESSES
# =============================================================================

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Permit2 is deployed via CREATE2 at the same address on all chains
CANONICAL_PERMIT2_ADDRESS = "0x000000000022D473030F116dDEE9F6B43aC78BA3"

# =============================================================================
# INIT CODE HASHES
# =============================================================================

V2_INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"
V3_INIT_CODE_HASH = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"

# =============================================================================
# CONTRACTS
# =============================================================================

UNSUPPORTED_PROTOCOL = "UnsupportedProtocol"
UNIVERSAL_ROUTER = "UniversalRouter"

# =============================================================================
# ENVIRONMENT & FILESYSTEM
# =============================================================================

PRIVATE_KEY_ENV = "PRIVATE_KEY"

# Forge build output, relative to the working directory
FORGE_OUT_DIR = Path("out")

LOGS_DIR = Path("logs")

"""Deploy Uniswap's UnsupportedProtocol and UniversalRouter contracts to an EVM chain."""

__version__ = "0.1.0"

"""
Configuration package for the Universal Router deployment.

Contains the deployment constants, command-line parsing and the
per-chain deployment logger.
"""

from universal_router_deploy.config.constants import (
    ZERO_ADDRESS,
    CANONICAL_PERMIT2_ADDRESS,
    V2_INIT_CODE_HASH,
    V3_INIT_CODE_HASH,
    UNSUPPORTED_PROTOCOL,
    UNIVERSAL_ROUTER,
    PRIVATE_KEY_ENV,
    FORGE_OUT_DIR,
    LOGS_DIR,
)

from universal_router_deploy.config.cli import (
    DeploymentConfig,
    build_parser,
    parse_arguments,
)

from universal_router_deploy.config.logging_config import (
    DeploymentLogger,
    STEP,
    SUCCESS,
    DEPLOYMENT,
)

__all__ = [
    # Constants
    'ZERO_ADDRESS',
    'CANONICAL_PERMIT2_ADDRESS',
    'V2_INIT_CODE_HASH',
    'V3_INIT_CODE_HASH',
    'UNSUPPORTED_PROTOCOL',
    'UNIVERSAL_ROUTER',
    'PRIVATE_KEY_ENV',
    'FORGE_OUT_DIR',
    'LOGS_DIR',

    # CLI
    'DeploymentConfig',
    'build_parser',
    'parse_arguments',

    # Logging
    'DeploymentLogger',
    'STEP',
    'SUCCESS',
    'DEPLOYMENT',
]

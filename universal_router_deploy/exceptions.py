# Base exception
class DeploymentError(Exception):
    """
    Base exception for all errors raised while preparing or running a
    router deployment
    """


class ArgumentError(DeploymentError, ValueError):
    """
    Raised when the command line is malformed: an unknown flag, a flag
    without a value, or a missing required parameter
    """


class InvalidAddressError(DeploymentError, ValueError):
    """
    Raised when a configured address is not a 0x-prefixed 20-byte hex string
    """


class MissingEnvironmentError(DeploymentError):
    """
    Raised when a required environment variable (the deployer key) is unset
    """


class InsufficientBalanceError(DeploymentError):
    """
    Raised when the deployer account cannot pay for gas
    """


class ArtifactError(DeploymentError):
    """
    Raised when a forge build artifact is missing or malformed
    """


class TransactionFailedError(DeploymentError):
    """
    Raised when a deployment transaction is mined but reverted
    """

class SignalingError(Exception):
    """Base exception for all signaling module errors."""
    pass

class ProblemFormatError(SignalingError):
    """Raised when a problem instance cannot be parsed."""
    pass

class ConfigurationError(SignalingError):
    """Raised when configuration is invalid."""
    pass

class InvalidMoveError(SignalingError):
    """Raised when a schedule edit addresses a phase that does not exist."""
    pass

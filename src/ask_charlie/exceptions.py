class AskCharlieError(Exception):
    """Base exception for Ask Charlie service."""


class ConfigurationError(AskCharlieError):
    """Raised when configuration values are missing or invalid."""


class AgentNotInitializedError(AskCharlieError):
    """Raised when the app is used before initialization."""

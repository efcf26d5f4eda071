class EC2LifecycleError(Exception):
    """Base error for the ec2 CLI."""


class ConfigError(EC2LifecycleError):
    """Raised for invalid or unreadable settings."""

    def __init__(self, message: str, key: str = None):
        self.key = key
        if key:
            message = f"Invalid setting '{key}': {message}"
        super().__init__(message)

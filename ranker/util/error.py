"""Startup configuration errors."""


class ConfigurationError(Exception):
    """Settings are inconsistent; the process should not start.

    Attributes:
        settings: Names of the environment variables involved
    """

    def __init__(self, message: str, *settings: str):
        self.settings = settings
        super().__init__(message)

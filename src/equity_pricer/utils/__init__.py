from .logging_config import (
    DEFAULT_LOGGING,
    setup_logging,
    setup_logging_from_config,
)

__all__ = [
    "DEFAULT_LOGGING",
    "setup_logging",
    "setup_logging_from_config",
]

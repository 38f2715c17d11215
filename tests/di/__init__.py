"""Mock providers for testing."""

from .container import build_test_container
from .mail import MockMailProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "build_test_container",
]

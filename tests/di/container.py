"""Test containers."""

from dishka import AsyncContainer

from ranker.util.di import MOCKABLE, Component
from ranker.util.di.container import create_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Container with every mockable component mocked except ``unmock``.

    Importing ``tests.di`` registers the mock variants, so this module
    must be reached through that package.

    Examples:
        build_test_container()                        # in-memory, recording mailer
        build_test_container(unmock={"persistence"})  # real PostgreSQL
    """
    unmock = unmock or set()
    unknown = unmock - MOCKABLE
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return create_container(mocked=MOCKABLE - unmock)

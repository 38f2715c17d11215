"""Provider base with mock/production variants."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence", "mail"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider that names a ``__mock_component__`` is only a slot: its
    subclasses are the real variants, told apart by ``__is_mock__``.
    Providers without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def variant(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the mock or production subclass.

        Raises:
            ValueError: If no subclass of the requested kind is registered
        """
        variants = cls.__subclasses__()
        if not variants:
            return cls
        for variant in variants:
            if variant.__is_mock__ == mock:
                return variant
        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} provider registered for {cls.__mock_component__ or cls.__name__}"
        )

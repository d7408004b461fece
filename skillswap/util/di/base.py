"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# External components that tests replace with in-memory doubles
Component = Literal["persistence", "email", "media", "security"]


class ProviderBase(Provider):
    """Provider that knows whether it stands in for an external component.

    Concrete providers leave both markers unset. A mockable component is a
    base class naming the component with one production and one mock
    subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def component_name(cls) -> Component | None:
        return cls.__mock_component__

    @classmethod
    def is_mockable(cls) -> bool:
        """True for component bases that have implementations to choose from."""
        return bool(cls.__subclasses__())

"""Provider base class shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Names of components that tests can swap for mocks
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with component metadata.

    ``__mock_component__`` names a mockable component on its base class;
    ``__is_mock__`` marks the implementation used by tests.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

"""Provider base carrying mock/production metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A mockable component is declared as a base class setting
    ``__mock_component__`` with one production and one mock subclass, the
    latter setting ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

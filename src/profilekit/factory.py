"""Pluggable profile construction."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from profilekit.errors import (
    ProfileDefinitionError,
    ProfileErrorCode,
    ProfileFactoryRequiredError,
)
from profilekit.profile import BasicProfile

P = TypeVar("P", bound=BasicProfile)

ProfileFactoryFn = Callable[[tuple[object, ...]], P]


class ProfileFactory(Generic[P]):
    """Hold the constructor used to create new empty profiles."""

    def __init__(self, profile_type: type[P]) -> None:
        """Install the default factory building ``profile_type()``.

        Args:
            profile_type: Profile type built when no factory is installed.
        """
        self._profile_type = profile_type
        self._factory: ProfileFactoryFn[P] = self._default_factory
        self._sealed = False

    @property
    def profile_type(self) -> type[P]:
        """Return the default profile type."""
        return self._profile_type

    def seal(self) -> None:
        """Forbid replacing the installed factory."""
        self._sealed = True

    def set_factory(self, factory: ProfileFactoryFn[P] | None) -> None:
        """Install a factory receiving the ``new_profile`` parameter tuple.

        The installed factory is left unchanged when an error is raised.

        Args:
            factory: Constructor function.

        Raises:
            ProfileFactoryRequiredError: If ``factory`` is ``None``.
            ProfileDefinitionError: If the factory is sealed.
        """
        if factory is None:
            raise ProfileFactoryRequiredError(self._profile_type.__name__)
        if self._sealed:
            raise ProfileDefinitionError(
                ProfileErrorCode.DEFINITION_SEALED,
                "Error: cannot replace profile factory after construction.",
                data={"profile_type": self._profile_type.__name__},
            )
        self._factory = factory

    def build(self, *parameters: object) -> P:
        """Build a new profile; factory errors propagate unchanged."""
        return self._factory(parameters)

    def _default_factory(self, parameters: tuple[object, ...]) -> P:
        del parameters
        return self._profile_type()

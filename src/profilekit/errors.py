"""Errors raised while constructing a profile definition."""

from __future__ import annotations

from enum import StrEnum


class ProfileErrorCode(StrEnum):
    """Reasons a profile definition rejects a setup call."""

    FACTORY_REQUIRED = "profile_factory_required"
    DEFINITION_SEALED = "profile_definition_sealed"


class ProfileDefinitionError(RuntimeError):
    """Setup call refused by a registry, factory or definition.

    Registering an attribute or replacing the factory once a definition is
    constructed raises this with ``DEFINITION_SEALED``.
    """

    def __init__(
        self,
        code: ProfileErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create profile definition error.

        Args:
            code: Reason the setup call was refused.
            message: Human-readable error message.
            data: Offending attribute or profile type, for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}


class ProfileFactoryRequiredError(ProfileDefinitionError, ValueError):
    """A ``None`` profile factory was passed where a constructor is required."""

    def __init__(self, profile_type: str) -> None:
        """Create missing-factory error.

        Args:
            profile_type: Name of the default profile type still in effect.
        """
        super().__init__(
            ProfileErrorCode.FACTORY_REQUIRED,
            "Error: profile factory is required.",
            data={"profile_type": profile_type},
        )

"""Unit tests for pluggable profile construction."""

from __future__ import annotations

import pytest

from profilekit.errors import (
    ProfileDefinitionError,
    ProfileErrorCode,
    ProfileFactoryRequiredError,
)
from profilekit.factory import ProfileFactory
from profilekit.profile import BasicProfile, CommonProfile


@pytest.mark.unit
def test_default_factory_builds_profile_type_ignoring_parameters() -> None:
    """Default factory should build an empty profile of the declared type."""
    factory = ProfileFactory(CommonProfile)

    profile = factory.build("ignored", 1)

    assert type(profile) is CommonProfile
    assert profile.attributes == {}


@pytest.mark.unit
def test_installed_factory_receives_parameter_tuple() -> None:
    """Installed factory should be called with the parameters as a tuple."""
    # Arrange - factory recording its input
    received: list[tuple[object, ...]] = []
    built = BasicProfile(id="fixed")

    def _factory(parameters: tuple[object, ...]) -> BasicProfile:
        received.append(parameters)
        return built

    factory = ProfileFactory(BasicProfile)
    factory.set_factory(_factory)

    # Act - build with parameters
    profile = factory.build("x", "y")

    # Assert - exact factory result and parameters
    assert profile is built
    assert received == [("x", "y")]


@pytest.mark.unit
def test_null_factory_is_rejected_and_previous_factory_kept() -> None:
    """Installing None should fail and keep the installed factory."""
    # Arrange - factory with custom constructor
    factory = ProfileFactory(BasicProfile)
    factory.set_factory(lambda parameters: BasicProfile(id="custom"))

    # Act - install None
    with pytest.raises(ValueError) as exc_info:
        factory.set_factory(None)

    # Assert - argument error with required code, previous factory still used
    assert isinstance(exc_info.value, ProfileFactoryRequiredError)
    assert isinstance(exc_info.value, ProfileDefinitionError)
    assert exc_info.value.code == ProfileErrorCode.FACTORY_REQUIRED
    assert exc_info.value.data == {"profile_type": "BasicProfile"}
    assert factory.build().id == "custom"


@pytest.mark.unit
def test_sealed_factory_cannot_be_replaced() -> None:
    """Sealed factory should reject replacement."""
    factory = ProfileFactory(BasicProfile)
    factory.seal()

    with pytest.raises(ProfileDefinitionError) as exc_info:
        factory.set_factory(lambda parameters: BasicProfile())

    assert exc_info.value.code == ProfileErrorCode.DEFINITION_SEALED
    assert not isinstance(exc_info.value, ValueError)
    assert type(factory.build()) is BasicProfile


@pytest.mark.unit
def test_factory_errors_propagate_unchanged() -> None:
    """Errors raised by the factory should reach the caller."""

    def _broken(parameters: tuple[object, ...]) -> BasicProfile:
        raise LookupError("no such profile")

    factory = ProfileFactory(BasicProfile)
    factory.set_factory(_broken)

    with pytest.raises(LookupError, match="no such profile"):
        factory.build()

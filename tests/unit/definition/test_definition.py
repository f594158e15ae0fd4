"""Unit tests for profile definition dispatch and construction."""

from __future__ import annotations

import logging

import pytest

from profilekit.converters import AbstractAttributeConverter, Converters
from profilekit.definition import ProfileDefinition
from profilekit.errors import ProfileDefinitionError, ProfileErrorCode
from profilekit.models import AttributeLocation
from profilekit.profile import BasicProfile, CommonProfile


class _RecordingProfile:
    """Profile double recording every write call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object]] = []

    def add_attribute(self, name: str, value: object) -> None:
        self.calls.append(("profile", name, value))

    def add_authentication_attribute(self, name: str, value: object) -> None:
        self.calls.append(("authentication", name, value))


class _AlwaysNoneConverter(AbstractAttributeConverter[int]):
    """Converter failing every conversion."""

    def __init__(self) -> None:
        super().__init__(int)

    def _accepts(self, raw: object) -> bool:
        return False


class _ExplodingConverter:
    """Converter raising on use."""

    def convert(self, raw: object) -> object:
        raise ValueError(f"cannot convert {raw!r}")


class _SampleDefinition(ProfileDefinition[CommonProfile]):
    """Definition fixture with a handful of attributes."""

    def define(self) -> None:
        self.primary("id", Converters.INTEGER)
        self.primary("age", Converters.INTEGER)
        self.secondary("name", Converters.STRING)
        self.secondary("broken", _AlwaysNoneConverter())
        self.secondary("exploding", _ExplodingConverter())


@pytest.fixture
def definition() -> _SampleDefinition:
    """Constructed sample definition."""
    return _SampleDefinition()


@pytest.fixture
def profile() -> _RecordingProfile:
    """Fresh write-recording profile double."""
    return _RecordingProfile()


@pytest.mark.unit
def test_definition_exposes_registered_names(definition: _SampleDefinition) -> None:
    """Names registered in define should be listed by classification."""
    assert definition.primary_attributes == ("id", "age")
    assert definition.secondary_attributes == ("name", "broken", "exploding")
    assert definition.converter_for("age") is Converters.INTEGER
    assert set(definition.converters) == {"id", "age", "name", "broken", "exploding"}


@pytest.mark.unit
@pytest.mark.parametrize("location", list(AttributeLocation))
def test_null_raw_value_is_never_written(
    definition: _SampleDefinition,
    profile: _RecordingProfile,
    location: AttributeLocation,
) -> None:
    """A None raw value should short-circuit before any write."""
    definition.convert_and_add(profile, location, "age", None)
    definition.convert_and_add(profile, location, "unregistered", None)

    assert profile.calls == []


@pytest.mark.unit
def test_registered_converter_types_profile_attribute(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """Converted value should be written once to the profile bucket."""
    # Act - convert string age
    definition.convert_and_add(
        profile, AttributeLocation.PROFILE_ATTRIBUTE, "age", "42"
    )

    # Assert - exactly one typed write
    assert profile.calls == [("profile", "age", 42)]
    assert isinstance(profile.calls[0][2], int)


@pytest.mark.unit
def test_missing_converter_passes_raw_value_through(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """Unregistered names should be written unconverted."""
    definition.convert_and_add(
        profile, AttributeLocation.AUTHENTICATION_ATTRIBUTE, "sessionIndex", "abc"
    )

    assert profile.calls == [("authentication", "sessionIndex", "abc")]


@pytest.mark.unit
def test_converter_yielding_none_still_writes(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """A None conversion result is written, unlike a None raw value."""
    definition.convert_and_add(
        profile, AttributeLocation.PROFILE_ATTRIBUTE, "broken", "value"
    )

    assert profile.calls == [("profile", "broken", None)]


@pytest.mark.unit
def test_batch_dispatches_each_mapping_to_its_bucket(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """Batch call should route profile and authentication entries separately."""
    # Act - one entry in each mapping
    definition.convert_and_add_all(profile, {"name": "Alice"}, {"idp": "provider1"})

    # Assert - one write per bucket
    assert sorted(profile.calls) == [
        ("authentication", "idp", "provider1"),
        ("profile", "name", "Alice"),
    ]


@pytest.mark.unit
def test_batch_treats_missing_mappings_as_empty(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """None mappings should be accepted and produce no writes."""
    definition.convert_and_add_all(profile, None, None)
    definition.convert_and_add_all(profile)
    definition.convert_and_add_all(profile, authentication_attributes={"id": "7"})

    assert profile.calls == [("authentication", "id", 7)]


@pytest.mark.unit
def test_batch_propagates_converter_errors_without_rollback(
    definition: _SampleDefinition, profile: _RecordingProfile
) -> None:
    """Converter failures should surface and keep earlier writes."""
    # Arrange - ordered mapping with failing entry in the middle
    attributes = {"name": "Alice", "exploding": "boom", "age": "30"}

    # Act - batch convert
    with pytest.raises(ValueError, match="cannot convert 'boom'"):
        definition.convert_and_add_all(profile, attributes)

    # Assert - first write kept, later entries not reached
    assert profile.calls == [("profile", "name", "Alice")]


@pytest.mark.unit
def test_dispatch_logs_conversions_at_debug(
    definition: _SampleDefinition,
    profile: _RecordingProfile,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Dispatcher should trace conversion, pass-through and skipped values."""
    caplog.set_level(logging.DEBUG, logger="profilekit.definition")

    definition.convert_and_add(profile, AttributeLocation.PROFILE_ATTRIBUTE, "age", "5")
    definition.convert_and_add(profile, AttributeLocation.PROFILE_ATTRIBUTE, "x", "y")
    definition.convert_and_add(profile, AttributeLocation.PROFILE_ATTRIBUTE, "z", None)

    messages = [record.getMessage() for record in caplog.records]
    assert "converted to => key: age / value: 5 / int" in messages
    assert "no conversion => key: x / value: 'y' / str" in messages
    assert "skipped null => key: z" in messages


@pytest.mark.unit
def test_new_profile_uses_default_profile_type(
    definition: _SampleDefinition,
) -> None:
    """Without a factory the declared default profile type is built."""
    profile = definition.new_profile()

    assert type(profile) is CommonProfile
    assert definition.profile_type is CommonProfile


@pytest.mark.unit
def test_new_profile_returns_factory_result_for_parameters() -> None:
    """Constructor factory should receive the new_profile parameters."""
    # Arrange - definition with a factory using its first parameter as id
    definition = ProfileDefinition(
        profile_type=BasicProfile,
        profile_factory=lambda parameters: BasicProfile(id=str(parameters[0])),
    )

    # Act - build with parameters
    profile = definition.new_profile("user-1", "ignored")

    # Assert - factory result returned
    assert profile.id == "user-1"


@pytest.mark.unit
def test_factory_can_be_set_during_define() -> None:
    """Subclasses may install their factory while defining attributes."""

    class _FactoryDefinition(ProfileDefinition[BasicProfile]):
        def define(self) -> None:
            self.set_profile_factory(lambda parameters: BasicProfile(id="built"))
            self.primary("id", Converters.STRING)

    definition = _FactoryDefinition(profile_type=BasicProfile)

    assert definition.new_profile().id == "built"


@pytest.mark.unit
def test_null_factory_during_define_fails_construction() -> None:
    """Installing a None factory should fail with a configuration error."""

    class _BrokenDefinition(ProfileDefinition[BasicProfile]):
        def define(self) -> None:
            self.set_profile_factory(None)

    with pytest.raises(ProfileDefinitionError) as exc_info:
        _BrokenDefinition()

    assert exc_info.value.code == ProfileErrorCode.FACTORY_REQUIRED


@pytest.mark.unit
def test_constructed_definition_rejects_further_changes(
    definition: _SampleDefinition,
) -> None:
    """Registrations and factory are sealed once construction completes."""
    with pytest.raises(ProfileDefinitionError) as register_exc:
        definition.primary("late", Converters.STRING)
    with pytest.raises(ProfileDefinitionError) as factory_exc:
        definition.set_profile_factory(lambda parameters: CommonProfile())

    assert register_exc.value.code == ProfileErrorCode.DEFINITION_SEALED
    assert factory_exc.value.code == ProfileErrorCode.DEFINITION_SEALED
    assert "late" not in definition.primary_attributes
    assert type(definition.new_profile()) is CommonProfile


@pytest.mark.unit
def test_dispatch_into_real_profile_drops_failed_conversions(
    definition: _SampleDefinition,
) -> None:
    """CommonProfile ignores the None written for a failed conversion."""
    profile = definition.new_profile()

    definition.convert_and_add_all(
        profile, {"age": "x", "name": "Bob"}, {"id": "9"}
    )

    assert profile.attributes == {"name": "Bob"}
    assert profile.authentication_attributes == {"id": 9}

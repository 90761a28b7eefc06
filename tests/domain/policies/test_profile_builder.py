from datetime import date

import pytest

from musicopedia.domain.entities.performer import Performer, PerformerRequest
from musicopedia.domain.entities.profiles import GroupProfile, SoloProfile
from musicopedia.domain.enums import Gender, GroupActivityStatus, PerformerType
from musicopedia.domain.errors import PerformerValidationError, ProfileTypeError
from musicopedia.domain.policies.profile_builder import (
    GroupAttributes,
    SoloAttributes,
    attach_profile,
    build_group_profile,
    build_solo_profile,
)


def _performer(t: PerformerType, name="Act") -> Performer:
    return Performer(name=name, type=t)


def test_attach_dispatches_by_type():
    assert isinstance(attach_profile(_performer(PerformerType.solo)), SoloProfile)
    assert isinstance(attach_profile(_performer(PerformerType.group)), GroupProfile)
    assert attach_profile(_performer(PerformerType.franchise)) is None
    assert attach_profile(_performer(PerformerType.various)) is None


def test_attach_rejects_other_variant():
    with pytest.raises(ProfileTypeError):
        attach_profile(_performer(PerformerType.solo), GroupAttributes())
    with pytest.raises(ProfileTypeError):
        attach_profile(_performer(PerformerType.group), SoloAttributes())
    with pytest.raises(ProfileTypeError):
        attach_profile(_performer(PerformerType.franchise), SoloAttributes())


def test_profile_cannot_be_built_for_wrong_performer():
    with pytest.raises(ProfileTypeError, match="cannot be attached to a performer of type group"):
        SoloProfile(performer=_performer(PerformerType.group))
    with pytest.raises(ProfileTypeError):
        GroupProfile(performer=_performer(PerformerType.solo))


def test_solo_dates_checked():
    p = _performer(PerformerType.solo)
    with pytest.raises(PerformerValidationError, match="Death date cannot be before birth date"):
        build_solo_profile(SoloAttributes(birth_date=date(2000, 1, 1), death_date=date(1999, 1, 1)), performer=p)
    ok = build_solo_profile(SoloAttributes(birth_date=date(2000, 1, 1), death_date=date(2000, 1, 1)), performer=p)
    assert ok.is_deceased


def test_group_dates_checked():
    p = _performer(PerformerType.group)
    with pytest.raises(PerformerValidationError, match="Disband date cannot be before formation date"):
        build_group_profile(
            GroupAttributes(formation_date=date(2010, 1, 1), disband_date=date(2009, 1, 1)), performer=p
        )


def test_builder_creates_performer_inline_through_factory():
    req = PerformerRequest(type=PerformerType.group, name="BTS", genre="K-pop", description="Boy group")
    prof = build_group_profile(
        GroupAttributes(formation_date=date(2013, 6, 13), gender=Gender.male, activity_status=GroupActivityStatus.active),
        request=req,
    )
    assert prof.performer.name == "BTS"
    assert prof.performer.type is PerformerType.group
    assert prof.gender is Gender.male


def test_builder_inline_request_runs_policy():
    req = PerformerRequest(type=PerformerType.solo, name="X", primary_language=None)
    with pytest.raises(PerformerValidationError, match="Primary language is required for solo artists"):
        build_solo_profile(request=req)


def test_builder_rejects_request_of_other_type():
    req = PerformerRequest(type=PerformerType.solo, name="X", primary_language="en")
    with pytest.raises(ProfileTypeError):
        build_group_profile(request=req)


def test_builder_needs_performer_or_request():
    with pytest.raises(ValueError):
        build_solo_profile()


def test_attributes_are_immutable():
    attrs = SoloAttributes(gender=Gender.female)
    with pytest.raises(Exception):
        attrs.gender = Gender.male  # type: ignore[misc]

from datetime import date
from uuid import uuid4

import pytest

from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.entities.profiles import PerformerRecord
from musicopedia.domain.enums import Gender, GroupActivityStatus, PerformerType
from musicopedia.domain.errors import PerformerValidationError, ProfileTypeError
from musicopedia.domain.policies.profile_builder import GroupAttributes, SoloAttributes, attach_profile
from musicopedia.services.mappers.performer import (
    apply_patch_to_domain,
    to_attributes_from_create,
    to_read_schema,
    to_request_from_create,
)
from musicopedia.services.schemas.performers import PerformerCreate, PerformerUpdate


def _group_record() -> PerformerRecord:
    p = Performer(id=uuid4(), name="BIGBANG", type=PerformerType.group, genre="K-pop", description="Boy group")
    profile = attach_profile(
        p,
        GroupAttributes(
            formation_date=date(2006, 8, 19),
            disband_date=date(2023, 6, 1),
            gender=Gender.male,
            activity_status=GroupActivityStatus.disbanded,
        ),
    )
    return PerformerRecord(performer=p, profile=profile)


def test_group_record_reads_without_solo_fields():
    out = to_read_schema(_group_record())
    assert out.formation_date == date(2006, 8, 19)
    assert out.disband_date == date(2023, 6, 1)
    assert out.group_gender is Gender.male
    assert out.birth_date is None
    assert out.death_date is None
    assert out.solo_gender is None


def test_solo_record_reads_without_group_fields():
    p = Performer(id=uuid4(), name="IU", type=PerformerType.solo, primary_language="Korean")
    rec = PerformerRecord(performer=p, profile=attach_profile(p, SoloAttributes(birth_date=date(1993, 5, 16))))
    out = to_read_schema(rec)
    assert out.birth_date == date(1993, 5, 16)
    assert out.formation_date is None and out.group_gender is None


def test_create_translation_maps_every_field():
    s = PerformerCreate(
        type="solo", name="IU", primary_language="Korean", external_id="sp-1", genre="Ballad",
        birth_date=date(1993, 5, 16), solo_gender=Gender.female,
    )
    req = to_request_from_create(s)
    assert (req.type, req.name, req.external_id, req.genre) == ("solo", "IU", "sp-1", "Ballad")
    attrs = to_attributes_from_create(s)
    assert isinstance(attrs, SoloAttributes)
    assert attrs.gender is Gender.female


def test_create_translation_without_profile_fields():
    assert to_attributes_from_create(PerformerCreate(type="group", name="G")) is None


def test_create_translation_rejects_mixed_profile_fields():
    s = PerformerCreate(type="solo", name="X", birth_date=date(2000, 1, 1), formation_date=date(2010, 1, 1))
    with pytest.raises(ProfileTypeError):
        to_attributes_from_create(s)


def test_update_is_null_propagating():
    rec = _group_record()
    out = apply_patch_to_domain(rec, PerformerUpdate(genre="Hip hop"))
    assert out.performer.genre == "Hip hop"
    assert out.performer.description == "Boy group"
    assert out.group.formation_date == date(2006, 8, 19)


def test_update_empty_string_overwrites():
    rec = _group_record()
    out = apply_patch_to_domain(rec, PerformerUpdate(description=""))
    assert out.performer.description == ""


def test_update_merges_profile_fields():
    rec = _group_record()
    out = apply_patch_to_domain(rec, PerformerUpdate(activity_status=GroupActivityStatus.active))
    assert out.group.activity_status is GroupActivityStatus.active
    assert out.group.disband_date == date(2023, 6, 1)


def test_update_rejects_other_variant_fields():
    with pytest.raises(ProfileTypeError):
        apply_patch_to_domain(_group_record(), PerformerUpdate(birth_date=date(1990, 1, 1)))


def test_update_rejects_blank_name():
    with pytest.raises(PerformerValidationError):
        apply_patch_to_domain(_group_record(), PerformerUpdate(name="  "))


def test_update_schema_has_no_type():
    assert "type" not in PerformerUpdate.model_fields

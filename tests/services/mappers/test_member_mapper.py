from datetime import date
from uuid import uuid4

import pytest

from musicopedia.domain.entities.member import Member
from musicopedia.services.mappers.member import apply_patch_to_domain, to_read_schema
from musicopedia.services.schemas.members import MemberUpdate


def _member() -> Member:
    return Member(
        id=uuid4(), member_name="Jennie", real_name="Kim Jennie", nationality="KR",
        description="Rapper", birth_date=date(1996, 1, 16),
    )


def test_absent_fields_leave_member_unchanged():
    m = apply_patch_to_domain(_member(), MemberUpdate(image="jennie.png"))
    assert m.image == "jennie.png"
    assert m.description == "Rapper"
    assert m.nationality == "KR"


def test_empty_string_overwrites():
    m = apply_patch_to_domain(_member(), MemberUpdate(description=""))
    assert m.description == ""


def test_death_before_birth_rejected():
    with pytest.raises(ValueError, match="death date cannot be before birth date"):
        apply_patch_to_domain(_member(), MemberUpdate(death_date=date(1990, 1, 1)))


def test_read_schema_flags_solo_debut():
    m = _member()
    assert to_read_schema(m).has_official_solo_debut is False
    m.solo_performer_id = uuid4()
    m.solo_performer_name = "JENNIE"
    out = to_read_schema(m)
    assert out.has_official_solo_debut is True
    assert out.solo_performer_name == "JENNIE"

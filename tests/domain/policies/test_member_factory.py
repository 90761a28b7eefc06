from datetime import date
from uuid import uuid4

import pytest

from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.enums import PerformerType
from musicopedia.domain.errors import MemberValidationError, ReferenceIntegrityError, SoloLinkError
from musicopedia.domain.policies.member_factory import (
    MemberRequest,
    create_member,
    link_solo_identity,
    unlink_solo_identity,
)


class FakeLookup:
    def __init__(self, *performers: Performer):
        self.by_id = {p.id: p for p in performers}

    def get(self, performer_id):
        return self.by_id.get(performer_id)


def test_create_member_requires_names():
    with pytest.raises(MemberValidationError, match="Member name is required"):
        create_member(MemberRequest(member_name=" ", real_name="Kim"))
    with pytest.raises(MemberValidationError, match="Member real name is required"):
        create_member(MemberRequest(member_name="RM", real_name=None))


def test_create_member_strips_and_checks_dates():
    with pytest.raises(MemberValidationError, match="death date cannot be before birth date"):
        create_member(
            MemberRequest(member_name="A", real_name="B", birth_date=date(2000, 1, 1), death_date=date(1990, 1, 1))
        )
    m = create_member(MemberRequest(member_name="  RM ", real_name=" Kim Nam-joon "))
    assert (m.member_name, m.real_name) == ("RM", "Kim Nam-joon")
    assert not m.has_solo_identity


def test_link_to_solo_performer():
    solo = Performer(id=uuid4(), name="Agust D", type=PerformerType.solo)
    m = create_member(MemberRequest(member_name="Suga", real_name="Min Yoon-gi", solo_performer_id=solo.id), FakeLookup(solo))
    assert m.solo_performer_id == solo.id
    assert m.solo_performer_name == "Agust D"
    unlink_solo_identity(m)
    assert m.solo_performer_id is None


@pytest.mark.parametrize(
    "ptype,name",
    [
        (PerformerType.group, "BTS"),
        (PerformerType.franchise, "K/DA"),
        (PerformerType.various, "Hallyu Hits 2020"),
    ],
)
def test_link_to_non_solo_names_member_performer_and_type(ptype, name):
    other = Performer(id=uuid4(), name=name, type=ptype)
    m = create_member(MemberRequest(member_name="Suga", real_name="Min Yoon-gi"))
    with pytest.raises(SoloLinkError) as ei:
        link_solo_identity(m, other.id, FakeLookup(other))
    msg = str(ei.value)
    assert "Suga" in msg and name in msg
    assert msg.endswith(f"type: {ptype.value.upper()}")
    assert ei.value.performer_type == ptype.value
    assert m.solo_performer_id is None


def test_link_to_unknown_performer():
    m = create_member(MemberRequest(member_name="Suga", real_name="Min Yoon-gi"))
    with pytest.raises(ReferenceIntegrityError, match="Solo artist not found"):
        link_solo_identity(m, uuid4(), FakeLookup())


def test_solo_id_without_lookup_is_rejected():
    with pytest.raises(ValueError):
        create_member(MemberRequest(member_name="A", real_name="B", solo_performer_id=uuid4()))

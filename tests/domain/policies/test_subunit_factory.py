from datetime import date
from uuid import uuid4

import pytest

from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.entities.profiles import GroupProfile
from musicopedia.domain.entities.subunit import SubunitRequest
from musicopedia.domain.enums import PerformerType
from musicopedia.domain.errors import CatalogValidationError, ReferenceIntegrityError
from musicopedia.domain.policies.subunit_factory import create_subunit


def _group(name: str) -> GroupProfile:
    return GroupProfile(performer=Performer(id=uuid4(), name=name, type=PerformerType.group))


def test_main_group_is_required():
    with pytest.raises(ReferenceIntegrityError, match="Main group is required"):
        create_subunit(SubunitRequest(name="BSS"), None)


def test_subunit_references_groups():
    seventeen, bss = _group("SEVENTEEN"), _group("BSS")
    s = create_subunit(SubunitRequest(name="BSS", formation_date=date(2018, 3, 21)), seventeen, bss)
    assert s.main_group_id == seventeen.performer_id
    assert s.group_identity_id == bss.performer_id
    assert s.main_group_name == "SEVENTEEN"
    assert s.has_own_ledger


def test_identity_must_differ_from_main_group():
    g = _group("EXO")
    with pytest.raises(ReferenceIntegrityError):
        create_subunit(SubunitRequest(name="EXO-CBX"), g, g)


def test_name_and_dates_checked():
    g = _group("EXO")
    with pytest.raises(CatalogValidationError, match="Subunit name is required"):
        create_subunit(SubunitRequest(name=""), g)
    with pytest.raises(CatalogValidationError, match="Disband date cannot be before formation date"):
        create_subunit(SubunitRequest(name="X", formation_date=date(2016, 1, 1), disband_date=date(2015, 1, 1)), g)

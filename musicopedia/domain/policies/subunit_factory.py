# musicopedia/domain/policies/subunit_factory.py
from __future__ import annotations

from typing import Optional

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.profiles import GroupProfile
from musicopedia.domain.entities.subunit import Subunit, SubunitRequest
from musicopedia.domain.errors import CatalogValidationError, ReferenceIntegrityError


def create_subunit(
    request: SubunitRequest,
    main_group: Optional[GroupProfile],
    group_identity: Optional[GroupProfile] = None,
) -> Subunit:
    """
    Build a Subunit under `main_group`.

    `group_identity` is only for subunits that debuted as a full group of
    their own; it must be a different group than the main one.
    """
    if main_group is None:
        raise ReferenceIntegrityError("Main group is required")
    if is_blank(request.name):
        raise CatalogValidationError("Subunit name is required", field="name")
    if group_identity is not None and group_identity.performer_id == main_group.performer_id:
        raise ReferenceIntegrityError("Subunit group identity must differ from its main group")
    if request.formation_date and request.disband_date and request.disband_date < request.formation_date:
        raise CatalogValidationError("Disband date cannot be before formation date", field="disband_date")

    return Subunit(
        main_group_id=main_group.performer_id,
        group_identity_id=group_identity.performer_id if group_identity else None,
        name=request.name,
        description=request.description,
        image=request.image,
        formation_date=request.formation_date,
        disband_date=request.disband_date,
        gender=request.gender,
        activity_status=request.activity_status,
        origin_country=request.origin_country,
        data_origin=request.data_origin,
        main_group_name=main_group.performer.name,
        group_identity_name=group_identity.performer.name if group_identity else None,
    )

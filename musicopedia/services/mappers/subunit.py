# musicopedia/services/mappers/subunit.py
from __future__ import annotations

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.subunit import Subunit, SubunitRequest
from musicopedia.domain.errors import CatalogValidationError
from musicopedia.services.schemas.subunits import SubunitCreate, SubunitRead, SubunitUpdate


def to_request_from_create(s: SubunitCreate) -> SubunitRequest:
    return SubunitRequest(
        name=s.name,
        description=s.description,
        image=s.image,
        formation_date=s.formation_date,
        disband_date=s.disband_date,
        gender=s.gender,
        activity_status=s.activity_status,
        origin_country=s.origin_country,
        data_origin=s.data_origin,
    )


def apply_patch_to_domain(item: Subunit, p: SubunitUpdate) -> Subunit:
    """`main_group_id` is fixed; `group_identity_id` is handled by the service."""
    if p.name is not None:
        if is_blank(p.name):
            raise CatalogValidationError("Subunit name is required", field="name")
        item.name = p.name
    if p.description is not None: item.description = p.description
    if p.image is not None: item.image = p.image
    if p.formation_date is not None: item.formation_date = p.formation_date
    if p.disband_date is not None: item.disband_date = p.disband_date
    if p.gender is not None: item.gender = p.gender
    if p.activity_status is not None: item.activity_status = p.activity_status
    if p.origin_country is not None: item.origin_country = p.origin_country
    if p.data_origin is not None: item.data_origin = p.data_origin

    if item.formation_date and item.disband_date and item.disband_date < item.formation_date:
        raise CatalogValidationError("Disband date cannot be before formation date", field="disband_date")
    return item


def to_read_schema(item: Subunit) -> SubunitRead:
    return SubunitRead(
        id=item.id,
        name=item.name,
        main_group_id=item.main_group_id,
        main_group_name=item.main_group_name,
        group_identity_id=item.group_identity_id,
        group_identity_name=item.group_identity_name,
        description=item.description,
        image=item.image,
        formation_date=item.formation_date,
        disband_date=item.disband_date,
        gender=item.gender,
        activity_status=item.activity_status,
        origin_country=item.origin_country,
        data_origin=item.data_origin,
        date_created=item.date_created,
        last_updated=item.last_updated,
    )

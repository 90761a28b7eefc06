# musicopedia/services/mappers/performer.py
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.performer import Performer, PerformerRequest
from musicopedia.domain.entities.profiles import PerformerRecord
from musicopedia.domain.errors import PerformerValidationError, ProfileTypeError
from musicopedia.domain.policies.profile_builder import (
    GroupAttributes,
    ProfileAttributes,
    SoloAttributes,
    attach_profile,
)
from musicopedia.services.schemas.performers import (
    GroupFields,
    PerformerCreate,
    PerformerRead,
    PerformerSummary,
    PerformerUpdate,
    SoloFields,
)

_SOLO_FIELDS = tuple(SoloFields.model_fields)
_GROUP_FIELDS = tuple(GroupFields.model_fields)


def _supplied(s, fields) -> bool:
    return any(getattr(s, f) is not None for f in fields)


def to_request_from_create(s: PerformerCreate) -> PerformerRequest:
    return PerformerRequest(
        type=s.type,
        name=s.name,
        external_id=s.external_id,
        description=s.description,
        image=s.image,
        primary_language=s.primary_language,
        genre=s.genre,
        origin_country=s.origin_country,
        data_origin=s.data_origin,
    )


def to_attributes_from_create(s: PerformerCreate) -> Optional[ProfileAttributes]:
    """
    Pick the profile attributes the payload carries. None when neither
    solo nor group fields were sent; mixing both is rejected.
    """
    solo, group = _supplied(s, _SOLO_FIELDS), _supplied(s, _GROUP_FIELDS)
    if solo and group:
        raise ProfileTypeError("Solo and group attributes cannot be sent together", field="type")
    if solo:
        return SoloAttributes(
            birth_date=s.birth_date,
            death_date=s.death_date,
            gender=s.solo_gender,
            group_affiliation_status=s.group_affiliation_status,
        )
    if group:
        return GroupAttributes(
            formation_date=s.formation_date,
            disband_date=s.disband_date,
            gender=s.group_gender,
            activity_status=s.activity_status,
        )
    return None


def apply_patch_to_domain(record: PerformerRecord, p: PerformerUpdate) -> PerformerRecord:
    """
    Null-propagating update: only fields that are not None are applied.
    Profile fields are merged onto the current profile and re-validated.
    """
    item: Performer = record.performer
    if p.name is not None:
        if is_blank(p.name):
            raise PerformerValidationError("Performer name cannot be empty", field="name")
        item.name = p.name
    if p.external_id is not None: item.external_id = p.external_id
    if p.description is not None: item.description = p.description
    if p.image is not None: item.image = p.image
    if p.primary_language is not None: item.primary_language = p.primary_language
    if p.genre is not None: item.genre = p.genre
    if p.origin_country is not None: item.origin_country = p.origin_country
    if p.data_origin is not None: item.data_origin = p.data_origin

    solo, group = _supplied(p, _SOLO_FIELDS), _supplied(p, _GROUP_FIELDS)
    if solo and group:
        raise ProfileTypeError("Solo and group attributes cannot be sent together", field="type")

    attrs: Optional[ProfileAttributes] = None
    if solo:
        cur = record.solo
        attrs = SoloAttributes(
            birth_date=p.birth_date if p.birth_date is not None else (cur.birth_date if cur else None),
            death_date=p.death_date if p.death_date is not None else (cur.death_date if cur else None),
            gender=p.solo_gender if p.solo_gender is not None else (cur.gender if cur else None),
            group_affiliation_status=(
                p.group_affiliation_status if p.group_affiliation_status is not None
                else (cur.group_affiliation_status if cur else None)
            ),
        )
    elif group:
        cur = record.group
        attrs = GroupAttributes(
            formation_date=p.formation_date if p.formation_date is not None else (cur.formation_date if cur else None),
            disband_date=p.disband_date if p.disband_date is not None else (cur.disband_date if cur else None),
            gender=p.group_gender if p.group_gender is not None else (cur.gender if cur else None),
            activity_status=p.activity_status if p.activity_status is not None else (cur.activity_status if cur else None),
        )

    if attrs is not None:
        return PerformerRecord(performer=item, profile=attach_profile(item, attrs))
    if record.profile is not None:
        return PerformerRecord(performer=item, profile=replace(record.profile, performer=item))
    return PerformerRecord(performer=item, profile=attach_profile(item))


def to_read_schema(record: PerformerRecord) -> PerformerRead:
    item = record.performer
    solo, group = record.solo, record.group
    return PerformerRead(
        id=item.id,
        type=item.type,
        name=item.name,
        external_id=item.external_id,
        description=item.description,
        image=item.image,
        primary_language=item.primary_language,
        genre=item.genre,
        origin_country=item.origin_country,
        data_origin=item.data_origin,
        date_created=item.date_created,
        last_updated=item.last_updated,
        birth_date=solo.birth_date if solo else None,
        death_date=solo.death_date if solo else None,
        solo_gender=solo.gender if solo else None,
        group_affiliation_status=solo.group_affiliation_status if solo else None,
        formation_date=group.formation_date if group else None,
        disband_date=group.disband_date if group else None,
        group_gender=group.gender if group else None,
        activity_status=group.activity_status if group else None,
    )


def to_summary(item: Performer) -> PerformerSummary:
    return PerformerSummary(id=item.id, type=item.type, name=item.name, image=item.image)

# musicopedia/domain/entities/performer.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from musicopedia.domain.enums.performer_type import PerformerType


@dataclass(frozen=True)
class PerformerRequest:
    """
    Framework-free creation request handed to the performer factory.
    `type` is the raw tag as received (enum member, string or None);
    the factory decides whether it maps to a policy.
    """
    type: Union[PerformerType, str, None]
    name: Optional[str] = None
    external_id: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    primary_language: Optional[str] = None
    genre: Optional[str] = None
    origin_country: Optional[str] = None
    data_origin: Optional[str] = None


@dataclass
class Performer:
    """
    Canonical identity for any cataloged act (solo, group, franchise, various).

    Invariants kept here:
      - type is a PerformerType
      - name is non-empty
    Type-specific rules (name length, required metadata) live in the
    factory policies so they run once, at creation.
    """
    # Persistence (optional)
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    data_origin: Optional[str] = None

    name: str = ""
    type: PerformerType = PerformerType.solo

    external_id: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    primary_language: Optional[str] = None
    genre: Optional[str] = None
    origin_country: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.type, PerformerType):
            self.type = PerformerType(self.type)
        if not self.name or not self.name.strip():
            raise ValueError("Performer.name is required")

    @property
    def is_solo(self) -> bool:
        return self.type is PerformerType.solo

    @property
    def is_group(self) -> bool:
        return self.type is PerformerType.group

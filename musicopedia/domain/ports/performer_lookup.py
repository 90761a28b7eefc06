from __future__ import annotations
from typing import Optional, Protocol
from uuid import UUID

from musicopedia.domain.entities.performer import Performer


class PerformerLookupPort(Protocol):
    """Resolves a performer id to the stored performer, or None."""
    def get(self, performer_id: UUID) -> Optional[Performer]: ...

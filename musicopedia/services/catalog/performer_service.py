# musicopedia/services/catalog/performer_service.py
from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.common.settings import get_settings
from musicopedia.database.repos.performer_repo import SqlAlchemyPerformerRepo
from musicopedia.database.repos.profile_repo import SqlAlchemyProfileRepo
from musicopedia.domain.entities.performer import Performer, PerformerRequest
from musicopedia.domain.entities.profiles import GroupProfile, PerformerRecord, SoloProfile
from musicopedia.domain.enums import PerformerType
from musicopedia.domain.errors import CatalogValidationError, ConflictError
from musicopedia.domain.policies.performer_factory import PerformerFactory
from musicopedia.domain.policies.profile_builder import ProfileAttributes, attach_profile
from musicopedia.services.mappers.performer import apply_patch_to_domain
from musicopedia.services.schemas.performers import PerformerUpdate

logger = get_logger(__name__)


class PerformerService:
    """
    Creates, reads, updates and deletes performers together with their
    per-type profile. Every write runs inside the caller's session transaction.
    """

    def __init__(self, db: Session, factory: Optional[PerformerFactory] = None):
        self.db = db
        self.cfg = get_settings()
        self.factory = factory or PerformerFactory()
        self.performers = SqlAlchemyPerformerRepo(db)
        self.profiles = SqlAlchemyProfileRepo(db)

    # ---------------------------- helpers ----------------------------
    def _prepare(self, request: PerformerRequest, attrs: Optional[ProfileAttributes]) -> PerformerRecord:
        """Dispatch + validate + build, with no writes."""
        performer = self.factory.create(request)
        profile = attach_profile(performer, attrs)
        return PerformerRecord(performer=performer, profile=profile)

    def _check_external_id(self, external_id: Optional[str], *, exclude_id: Optional[UUID] = None) -> None:
        if external_id and self.performers.exists_external_id(external_id, exclude_id=exclude_id):
            raise ConflictError(f"External id already in use: {external_id}")

    def _persist(self, record: PerformerRecord) -> PerformerRecord:
        saved = self.performers.save(record.performer)
        if record.profile is None:
            return PerformerRecord(performer=saved)
        profile = self.profiles.save(replace(record.profile, performer=saved))
        return PerformerRecord(performer=saved, profile=profile)

    def _load_profile(self, performer: Performer):
        if performer.is_solo:
            return self.profiles.get_solo(performer.id)
        if performer.is_group:
            return self.profiles.get_group(performer.id)
        return None

    # ---------------------------- create ----------------------------
    def create(self, request: PerformerRequest, attrs: Optional[ProfileAttributes] = None) -> PerformerRecord:
        try:
            record = self._prepare(request, attrs)
        except ValueError as e:
            logger.warning("Rejected %r performer %r: %s", request.type, request.name, e)
            raise
        self._check_external_id(record.performer.external_id)
        saved = self._persist(record)
        logger.info("Created %s performer %s (%s)", saved.performer.type.value, saved.performer.id, saved.performer.name)
        return saved

    def create_batch(
        self, items: Sequence[Tuple[PerformerRequest, Optional[ProfileAttributes]]]
    ) -> List[PerformerRecord]:
        """
        All-or-nothing: every item is dispatched and validated before the
        first row is written.
        """
        if len(items) > self.cfg.batch_create_limit:
            raise CatalogValidationError(
                f"Batch size {len(items)} exceeds the limit of {self.cfg.batch_create_limit}", field="items"
            )
        prepared: List[PerformerRecord] = []
        seen_ids: set[str] = set()
        for idx, (request, attrs) in enumerate(items):
            try:
                record = self._prepare(request, attrs)
            except ValueError as e:
                logger.warning("Rejected batch item %d (%r): %s", idx, request.name, e)
                raise
            ext = record.performer.external_id
            if ext:
                if ext in seen_ids:
                    raise ConflictError(f"External id repeated in batch: {ext}")
                seen_ids.add(ext)
                self._check_external_id(ext)
            prepared.append(record)

        saved = [self._persist(r) for r in prepared]
        logger.info("Created %d performers in one batch", len(saved))
        return saved

    # ---------------------------- read ----------------------------
    def get(self, performer_id: UUID) -> Optional[PerformerRecord]:
        performer = self.performers.get(performer_id)
        if performer is None:
            return None
        return PerformerRecord(performer=performer, profile=self._load_profile(performer))

    def get_by_external_id(self, external_id: str) -> Optional[PerformerRecord]:
        performer = self.performers.get_by_external_id(external_id)
        if performer is None:
            return None
        return PerformerRecord(performer=performer, profile=self._load_profile(performer))

    def list(self, *, type: Optional[PerformerType] = None, limit: int = 50, offset: int = 0) -> List[Performer]:
        return self.performers.list(type=type, limit=limit, offset=offset)

    def search(self, q: str, *, type: Optional[PerformerType] = None, limit: int = 25) -> List[Performer]:
        return self.performers.search(q, type=type, limit=min(limit, self.cfg.search_limit_max))

    def list_solos(self, **filters) -> List[SoloProfile]:
        return self.profiles.list_solos(**filters)

    def list_groups(self, **filters) -> List[GroupProfile]:
        return self.profiles.list_groups(**filters)

    # ---------------------------- update / delete ----------------------------
    def update(self, performer_id: UUID, patch: PerformerUpdate) -> Optional[PerformerRecord]:
        """Returns None when the performer does not exist."""
        record = self.get(performer_id)
        if record is None:
            return None
        record = apply_patch_to_domain(record, patch)
        if patch.external_id is not None:
            self._check_external_id(record.performer.external_id, exclude_id=performer_id)
        saved = self._persist(record)
        logger.info("Updated performer %s", performer_id)
        return saved

    def delete(self, performer_id: UUID) -> bool:
        deleted = self.performers.delete(performer_id)
        if deleted:
            logger.info("Deleted performer %s", performer_id)
        return deleted

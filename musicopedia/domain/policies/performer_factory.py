# musicopedia/domain/policies/performer_factory.py
from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.performer import Performer, PerformerRequest
from musicopedia.domain.enums.performer_type import PerformerType
from musicopedia.domain.errors import FactoryDispatchError, PerformerValidationError


class PerformerPolicy:
    """
    Validation + construction rules for one performer type.

    Subclasses set `performer_type`, `name_label`, `max_name_length` and
    add their own required fields in `validate_extra`. Validation is
    complete before `build` is called; `build` only assembles the object.
    """
    performer_type: PerformerType
    name_label: str
    max_name_length: int

    def validate(self, request: PerformerRequest) -> None:
        name = request.name
        if is_blank(name):
            raise PerformerValidationError(f"{self.name_label} cannot be empty", field="name")
        if len(name) > self.max_name_length:
            raise PerformerValidationError(
                f"{self.name_label} cannot exceed {self.max_name_length} characters", field="name"
            )
        self.validate_extra(request)

    def validate_extra(self, request: PerformerRequest) -> None:
        pass

    def build(self, request: PerformerRequest) -> Performer:
        return Performer(
            name=request.name,
            type=self.performer_type,
            external_id=request.external_id,
            description=request.description,
            image=request.image,
            primary_language=request.primary_language,
            genre=request.genre,
            origin_country=request.origin_country,
            data_origin=request.data_origin,
        )


class SoloPolicy(PerformerPolicy):
    performer_type = PerformerType.solo
    name_label = "Solo artist name"
    max_name_length = 100

    def validate_extra(self, request: PerformerRequest) -> None:
        if is_blank(request.primary_language):
            raise PerformerValidationError(
                "Primary language is required for solo artists", field="primary_language"
            )


class GroupPolicy(PerformerPolicy):
    performer_type = PerformerType.group
    name_label = "Group name"
    max_name_length = 150

    def validate_extra(self, request: PerformerRequest) -> None:
        if is_blank(request.genre):
            raise PerformerValidationError("Genre is required for groups", field="genre")
        if is_blank(request.description):
            raise PerformerValidationError(
                "Description is required for groups to explain their concept", field="description"
            )


class FranchisePolicy(PerformerPolicy):
    """Virtual idols, fictional characters, brand-based acts."""
    performer_type = PerformerType.franchise
    name_label = "Franchise artist name"
    max_name_length = 200
    min_description_length = 50

    def validate_extra(self, request: PerformerRequest) -> None:
        if request.description is None or len(request.description) < self.min_description_length:
            raise PerformerValidationError(
                f"Franchise artists require detailed description (minimum {self.min_description_length} characters)",
                field="description",
            )
        if is_blank(request.origin_country):
            raise PerformerValidationError(
                "Origin country is required for franchise artists", field="origin_country"
            )


class VariousPolicy(PerformerPolicy):
    """Compilations and other multi-artist entries."""
    performer_type = PerformerType.various
    name_label = "Various artist compilation name"
    max_name_length = 300
    min_description_length = 30

    def validate_extra(self, request: PerformerRequest) -> None:
        if request.description is None or len(request.description) < self.min_description_length:
            raise PerformerValidationError(
                f"Various artist compilations require description (minimum {self.min_description_length} "
                "characters) to explain the collection",
                field="description",
            )
        if is_blank(request.genre):
            raise PerformerValidationError(
                "Genre classification is required for various artist compilations", field="genre"
            )


DEFAULT_POLICIES = (SoloPolicy(), GroupPolicy(), FranchisePolicy(), VariousPolicy())


class PerformerFactory:
    """
    Picks the one policy matching a request's type tag.

    The tag must be a PerformerType or its exact string value; anything
    else (None, '', 'Band', 42) raises FactoryDispatchError.
    """

    def __init__(self, policies: Iterable[PerformerPolicy] = DEFAULT_POLICIES) -> None:
        self._policies: Dict[PerformerType, PerformerPolicy] = {}
        for p in policies:
            if p.performer_type in self._policies:
                raise ValueError(f"Duplicate policy for performer type {p.performer_type.value}")
            self._policies[p.performer_type] = p

    @staticmethod
    def resolve_type(tag: Union[PerformerType, str, None]) -> Optional[PerformerType]:
        if isinstance(tag, PerformerType):
            return tag
        if isinstance(tag, str) and tag:
            try:
                return PerformerType(tag)
            except ValueError:
                return None
        return None

    def policy_for(self, tag: Union[PerformerType, str, None]) -> PerformerPolicy:
        performer_type = self.resolve_type(tag)
        policy = self._policies.get(performer_type) if performer_type else None
        if policy is None:
            raise FactoryDispatchError(f"No factory for performer type: {tag!r}")
        return policy

    @property
    def supported_types(self) -> tuple[PerformerType, ...]:
        return tuple(self._policies)

    def validate(self, request: PerformerRequest) -> None:
        self.policy_for(request.type).validate(request)

    def build(self, request: PerformerRequest) -> Performer:
        """Assemble without validating. Prefer `create`."""
        return self.policy_for(request.type).build(request)

    def create(self, request: PerformerRequest) -> Performer:
        policy = self.policy_for(request.type)
        policy.validate(request)
        return policy.build(request)

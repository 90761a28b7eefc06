# musicopedia/domain/errors.py
from __future__ import annotations

from typing import Optional


class CatalogValidationError(ValueError):
    """
    A field rule was violated while validating a request.
    `field` names the offending attribute (e.g. "primary_language").
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class PerformerValidationError(CatalogValidationError):
    """A performer type policy rejected the request."""


class MemberValidationError(CatalogValidationError):
    """A member request is missing a required field."""


class ProfileTypeError(PerformerValidationError):
    """A Solo/Group profile was paired with a performer of another type."""


class ReferenceIntegrityError(ValueError):
    """A referenced row is missing or of the wrong kind; nothing was written."""


class SoloLinkError(ReferenceIntegrityError):
    """A member was linked to a performer that is not a solo act."""

    def __init__(self, member_name: str, performer_name: str, performer_type: str) -> None:
        super().__init__(
            f"Cannot link member '{member_name}' to artist '{performer_name}' - only SOLO artists "
            f"can be linked to members, but this artist is type: {str(performer_type).upper()}"
        )
        self.member_name = member_name
        self.performer_name = performer_name
        self.performer_type = performer_type


class MembershipTransitionError(ValueError):
    """A membership status change outside the allowed transitions."""


class FactoryDispatchError(LookupError):
    """No performer factory is registered for the requested type tag."""


class ConflictError(ValueError):
    """The write would duplicate a unique catalog key (external id, membership pair)."""

from __future__ import annotations
from enum import StrEnum

class GroupActivityStatus(StrEnum):
    active = "active"
    inactive = "inactive"
    disbanded = "disbanded"


class GroupAffiliationStatus(StrEnum):
    """Whether a solo act is, was or never has been part of a group."""
    never_in_a_group = "never_in_a_group"
    in_a_group = "in_a_group"
    was_in_a_group = "was_in_a_group"

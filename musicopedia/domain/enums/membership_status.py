from __future__ import annotations
from enum import StrEnum

class MembershipStatus(StrEnum):
    current = "current"
    former = "former"
    inactive = "inactive"

from __future__ import annotations
from enum import StrEnum

class PerformerType(StrEnum):
    solo = "solo"
    group = "group"
    franchise = "franchise"
    various = "various"

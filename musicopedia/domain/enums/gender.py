from __future__ import annotations
from enum import StrEnum

class Gender(StrEnum):
    male = "male"
    female = "female"
    mixed = "mixed"           # groups / subunits
    non_binary = "non_binary"
    unknown = "unknown"

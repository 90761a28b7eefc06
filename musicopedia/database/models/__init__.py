# musicopedia/database/models/__init__.py

from musicopedia.database.core.main import Base
from musicopedia.database.models.performer import (
    Performer,
    SoloProfile,
    GroupProfile,
)
from musicopedia.database.models.member import Member
from musicopedia.database.models.subunit import Subunit
from musicopedia.database.models.membership import (
    GroupMembership,
    SubunitMembership,
)

__all__ = [
    "Base",
    "Performer",
    "SoloProfile",
    "GroupProfile",
    "Member",
    "Subunit",
    "GroupMembership",
    "SubunitMembership",
]

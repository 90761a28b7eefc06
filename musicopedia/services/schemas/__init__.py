from musicopedia.services.schemas.performers import (
    PerformerCreate,
    PerformerBatchCreate,
    PerformerUpdate,
    PerformerRead,
    PerformerSummary,
)
from musicopedia.services.schemas.members import (
    MemberCreate,
    MemberUpdate,
    MemberRead,
    MemberSummary,
    SoloLinkRequest,
)
from musicopedia.services.schemas.subunits import (
    SubunitCreate,
    SubunitUpdate,
    SubunitRead,
)
from musicopedia.services.schemas.memberships import (
    GroupMembershipCreate,
    GroupMembershipUpdate,
    GroupMembershipRead,
    MembershipCount,
    SubunitMembershipRead,
)

__all__ = [
    "PerformerCreate",
    "PerformerBatchCreate",
    "PerformerUpdate",
    "PerformerRead",
    "PerformerSummary",
    "MemberCreate",
    "MemberUpdate",
    "MemberRead",
    "MemberSummary",
    "SoloLinkRequest",
    "SubunitCreate",
    "SubunitUpdate",
    "SubunitRead",
    "GroupMembershipCreate",
    "GroupMembershipUpdate",
    "GroupMembershipRead",
    "MembershipCount",
    "SubunitMembershipRead",
]

from musicopedia.domain.enums.gender import Gender
from musicopedia.domain.enums.group_status import GroupActivityStatus, GroupAffiliationStatus
from musicopedia.domain.enums.membership_status import MembershipStatus
from musicopedia.domain.enums.performer_type import PerformerType
__all__ = [
    "Gender",
    "GroupActivityStatus",
    "GroupAffiliationStatus",
    "MembershipStatus",
    "PerformerType",
]

# musicopedia/domain/entities/membership.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, FrozenSet, Optional, Tuple
from uuid import UUID

from musicopedia.domain.enums.membership_status import MembershipStatus
from musicopedia.domain.errors import MembershipTransitionError

# Explicit, caller-driven transitions. FORMER has no way out.
ALLOWED_TRANSITIONS: Dict[MembershipStatus, FrozenSet[MembershipStatus]] = {
    MembershipStatus.current: frozenset({MembershipStatus.former, MembershipStatus.inactive}),
    MembershipStatus.inactive: frozenset({MembershipStatus.current, MembershipStatus.former}),
    MembershipStatus.former: frozenset(),
}


@dataclass
class GroupMembership:
    """
    Ledger row for (group, member).

    Invariants checked on construction and on explicit transitions:
      - join_date is required
      - leave_date, if present, is not before join_date
      - FORMER carries a leave_date, CURRENT/INACTIVE never do
    The consistency engine (policies.membership_sync) writes status and
    leave_date directly and does not re-check the date ordering.
    """
    group_id: UUID = None   # required
    member_id: UUID = None  # required
    status: MembershipStatus = MembershipStatus.current
    join_date: date = None  # required
    leave_date: Optional[date] = None

    def __post_init__(self):
        if self.group_id is None:
            raise ValueError("GroupMembership.group_id is required")
        if self.member_id is None:
            raise ValueError("GroupMembership.member_id is required")
        if self.join_date is None:
            raise ValueError("GroupMembership.join_date is required")
        if not isinstance(self.status, MembershipStatus):
            self.status = MembershipStatus(self.status)
        if self.status is MembershipStatus.former and self.leave_date is None:
            raise ValueError("Former memberships require a leave date")
        if self.status is not MembershipStatus.former and self.leave_date is not None:
            raise ValueError("Leave date only applies to former memberships")
        self._check_order(self.leave_date)

    @property
    def key(self) -> Tuple[UUID, UUID]:
        return (self.group_id, self.member_id)

    def _check_order(self, leave_date: Optional[date]) -> None:
        if leave_date is not None and leave_date < self.join_date:
            raise ValueError("Leave date cannot be before join date")

    def can_transition_to(self, status: MembershipStatus) -> bool:
        return status is self.status or status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, status: MembershipStatus, leave_date: Optional[date] = None) -> bool:
        """
        Move to `status`. Returns False for a same-status no-op.
        Raises MembershipTransitionError for anything outside ALLOWED_TRANSITIONS.
        """
        status = MembershipStatus(status)
        if status is self.status:
            return False
        if not self.can_transition_to(status):
            raise MembershipTransitionError(
                f"Cannot change membership status from {self.status.value} to {status.value}"
            )

        if status is MembershipStatus.former:
            if leave_date is None:
                raise MembershipTransitionError("A leave date is required to mark a membership as former")
            self._check_order(leave_date)
            self.leave_date = leave_date
        else:
            if leave_date is not None:
                raise MembershipTransitionError("Leave date only applies to former memberships")
            self.leave_date = None

        self.status = status
        return True

    def change_join_date(self, join_date: date) -> None:
        if join_date is None:
            raise ValueError("GroupMembership.join_date is required")
        if self.leave_date is not None and self.leave_date < join_date:
            raise ValueError("Leave date cannot be before join date")
        self.join_date = join_date

    def change_leave_date(self, leave_date: date) -> None:
        """Correct the leave date of a FORMER membership without changing status."""
        if self.status is not MembershipStatus.former:
            raise MembershipTransitionError("Leave date only applies to former memberships")
        if leave_date is None:
            raise ValueError("Former memberships require a leave date")
        self._check_order(leave_date)
        self.leave_date = leave_date


@dataclass(frozen=True)
class SubunitMembership:
    """Existence-only link between a subunit and a member."""
    subunit_id: UUID
    member_id: UUID

    def __post_init__(self):
        if self.subunit_id is None or self.member_id is None:
            raise ValueError("SubunitMembership needs both subunit_id and member_id")

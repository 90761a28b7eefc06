# musicopedia/domain/policies/membership_sync.py
"""
Consistency engine between the membership ledger and member lifecycle facts.

The only fact acted on today is death:
  - no member            -> nothing happens
  - member has died      -> FORMER, leave_date = death_date (always overwritten)
  - member is alive      -> nothing happens; FORMER/INACTIVE are never reverted

Clearing a death date does not re-open a FORMER membership. The routine is
idempotent, so callers may re-run it after every death-date change.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from musicopedia.domain.entities.member import Member
from musicopedia.domain.entities.membership import GroupMembership
from musicopedia.domain.enums.membership_status import MembershipStatus


def sync_status_with_member(membership: GroupMembership, member: Optional[Member]) -> bool:
    """Apply the death rule to one row. Returns True if status or leave_date changed."""
    if member is None or not member.is_deceased:
        return False

    changed = membership.status is not MembershipStatus.former or membership.leave_date != member.death_date
    # leave_date/join_date ordering is intentionally not re-checked here
    membership.status = MembershipStatus.former
    membership.leave_date = member.death_date
    return changed


def sync_memberships(memberships: Iterable[GroupMembership], member: Optional[Member]) -> List[GroupMembership]:
    """Run the rule across a member's ledger rows; return the rows that changed."""
    return [m for m in memberships if sync_status_with_member(m, member)]

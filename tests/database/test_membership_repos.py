from datetime import date

from musicopedia.database.repos.member_repo import SqlAlchemyMemberRepo
from musicopedia.database.repos.membership_repo import (
    SqlAlchemyGroupMembershipRepo,
    SqlAlchemySubunitMembershipRepo,
)
from musicopedia.database.repos.performer_repo import SqlAlchemyPerformerRepo
from musicopedia.database.repos.profile_repo import SqlAlchemyProfileRepo
from musicopedia.database.repos.subunit_repo import SqlAlchemySubunitRepo
from musicopedia.domain.entities.member import Member
from musicopedia.domain.entities.membership import GroupMembership, SubunitMembership
from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.entities.profiles import GroupProfile
from musicopedia.domain.entities.subunit import Subunit
from musicopedia.domain.enums import MembershipStatus, PerformerType


def _group(db, name):
    p = SqlAlchemyPerformerRepo(db).save(
        Performer(name=name, type=PerformerType.group, genre="K-pop", description="Group")
    )
    return SqlAlchemyProfileRepo(db).save(GroupProfile(performer=p))


def _member(db, name):
    return SqlAlchemyMemberRepo(db).save(Member(member_name=name, real_name=name))


def test_group_membership_upsert_and_queries(db):
    repo = SqlAlchemyGroupMembershipRepo(db)
    g = _group(db, "BTS")
    jin, v = _member(db, "Jin"), _member(db, "V")

    repo.save(GroupMembership(group_id=g.performer_id, member_id=jin.id, join_date=date(2013, 6, 13)))
    repo.save(GroupMembership(group_id=g.performer_id, member_id=v.id, join_date=date(2013, 6, 13)))
    assert repo.exists(g.performer_id, jin.id)
    assert repo.count_by_group(g.performer_id) == 2

    m = repo.get(g.performer_id, jin.id)
    m.transition_to(MembershipStatus.inactive)
    repo.save(m)
    assert repo.count_by_group(g.performer_id) == 2
    assert [x.member_id for x in repo.list_by_group(g.performer_id, status=MembershipStatus.inactive)] == [jin.id]


def test_stored_row_with_leave_before_join_loads(db):
    repo = SqlAlchemyGroupMembershipRepo(db)
    g = _group(db, "G")
    mem = _member(db, "M")
    row = GroupMembership(group_id=g.performer_id, member_id=mem.id, join_date=date(2015, 1, 1))
    row.status = MembershipStatus.former
    row.leave_date = date(2014, 1, 1)
    repo.save(row)

    loaded = repo.get(g.performer_id, mem.id)
    assert loaded.status is MembershipStatus.former
    assert loaded.leave_date == date(2014, 1, 1)


def test_deleting_member_removes_its_memberships(db):
    repo = SqlAlchemyGroupMembershipRepo(db)
    g = _group(db, "G")
    mem = _member(db, "M")
    repo.save(GroupMembership(group_id=g.performer_id, member_id=mem.id, join_date=date(2020, 1, 1)))

    assert SqlAlchemyMemberRepo(db).delete(mem.id)
    assert repo.get(g.performer_id, mem.id) is None
    assert repo.list_by_group(g.performer_id) == []


def test_subunit_links_are_idempotent(db):
    main = _group(db, "SEVENTEEN")
    sub = SqlAlchemySubunitRepo(db).save(Subunit(main_group_id=main.performer_id, name="BSS"))
    assert sub.main_group_name == "SEVENTEEN"
    mem = _member(db, "Hoshi")
    links = SqlAlchemySubunitMembershipRepo(db)

    links.add(SubunitMembership(subunit_id=sub.id, member_id=mem.id))
    links.add(SubunitMembership(subunit_id=sub.id, member_id=mem.id))
    assert len(links.list_by_subunit(sub.id)) == 1
    assert links.exists(sub.id, mem.id)
    assert links.remove(sub.id, mem.id) is True
    assert links.remove(sub.id, mem.id) is False


def test_group_identity_is_cleared_not_cascaded(db):
    main, identity = _group(db, "SEVENTEEN"), _group(db, "BSS")
    subunits = SqlAlchemySubunitRepo(db)
    sub = subunits.save(
        Subunit(main_group_id=main.performer_id, group_identity_id=identity.performer_id, name="BSS")
    )
    assert sub.group_identity_name == "BSS"

    SqlAlchemyPerformerRepo(db).delete(identity.performer_id)
    survivor = subunits.get(sub.id)
    assert survivor is not None
    assert survivor.group_identity_id is None

    SqlAlchemyPerformerRepo(db).delete(main.performer_id)
    assert subunits.get(sub.id) is None

from datetime import datetime
from typing import TYPE_CHECKING

from governor.entities.group import Group
from governor.entities.membership import EnumeratedMembership
from governor.membership_diff import find_member_diff

if TYPE_CHECKING:
    from tests.setup import SetupTest

MEMBERSHIPS = [
    EnumeratedMembership("g1", "u1", True, datetime(2030, 1, 1), True),
    EnumeratedMembership("g1", "u2", False, None, False),
    EnumeratedMembership("g2", "u2", False, None, True),
]


def test_diff_of_same_set_is_empty():
    # type: () -> None
    assert find_member_diff(MEMBERSHIPS, MEMBERSHIPS) == []
    assert find_member_diff(MEMBERSHIPS, list(reversed(MEMBERSHIPS))) == []
    assert find_member_diff([], []) == []


def test_diff_from_empty():
    # type: () -> None
    assert find_member_diff([], MEMBERSHIPS) == MEMBERSHIPS
    assert find_member_diff(MEMBERSHIPS, []) == []


def test_changed_values_count_as_new():
    # type: () -> None
    promoted = EnumeratedMembership("g1", "u2", True, None, True)
    extended = EnumeratedMembership("g1", "u1", True, datetime(2031, 1, 1), True)
    after = [promoted, extended, MEMBERSHIPS[2]]

    assert sorted(find_member_diff(MEMBERSHIPS, after), key=lambda m: m.key) == [
        extended,
        promoted,
    ]


def test_hydration_does_not_affect_diff():
    # type: () -> None
    group = Group("g2", "g2", "g2")
    hydrated = [
        EnumeratedMembership("g2", "u2", False, None, True, group=group),
    ]
    assert find_member_diff(MEMBERSHIPS, hydrated) == []


def test_diff_after_new_direct_membership(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
        setup.add_group_to_group("department", "company")
        setup.add_user_to_group("gary@a.co", "team")

    membership_service = setup.service_factory.create_membership_service()
    before = membership_service.enumerate_all()
    with setup.transaction():
        setup.add_user_to_group("zorkian@a.co", "team")
    after = membership_service.enumerate_all()

    user_id = setup.user_id("zorkian@a.co")
    assert set(find_member_diff(before, after)) == {
        EnumeratedMembership(setup.group_id("team"), user_id, False, None, True),
        EnumeratedMembership(setup.group_id("department"), user_id, False, None, False),
        EnumeratedMembership(setup.group_id("company"), user_id, False, None, False),
    }
    assert find_member_diff(after, before) == []

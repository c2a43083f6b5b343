from datetime import datetime
from typing import TYPE_CHECKING

from governor.entities.membership import DirectMembership

if TYPE_CHECKING:
    from tests.setup import SetupTest


def test_list_direct_memberships(setup):
    # type: (SetupTest) -> None
    expires_at = datetime(2030, 1, 1)
    with setup.transaction():
        setup.add_user_to_group("gary@a.co", "some-group", is_admin=True, expires_at=expires_at)
        setup.add_user_to_group("gary@a.co", "other-group")
        setup.add_user_to_group("zorkian@a.co", "some-group")
        setup.create_group("empty-group")
    group_membership_repository = setup.repository_factory.create_group_membership_repository()
    gary = setup.user_id("gary@a.co")
    zorkian = setup.user_id("zorkian@a.co")
    some_group = setup.group_id("some-group")
    other_group = setup.group_id("other-group")

    assert len(group_membership_repository.list_direct_memberships()) == 3
    assert sorted(
        group_membership_repository.list_direct_memberships(user_id=gary),
        key=lambda m: m.group_id != some_group,
    ) == [
        DirectMembership(some_group, gary, True, expires_at),
        DirectMembership(other_group, gary, False, None),
    ]
    memberships = group_membership_repository.list_direct_memberships(group_ids=[some_group])
    assert {m.user_id for m in memberships} == {gary, zorkian}
    assert group_membership_repository.list_direct_memberships(
        user_id=zorkian, group_ids={other_group, some_group}
    ) == [DirectMembership(some_group, zorkian)]
    assert group_membership_repository.list_direct_memberships(group_ids=[]) == []
    assert (
        group_membership_repository.list_direct_memberships(
            group_ids=[setup.group_id("empty-group")]
        )
        == []
    )

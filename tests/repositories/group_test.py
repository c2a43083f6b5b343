from typing import TYPE_CHECKING

import pytest
from mock import patch
from sqlalchemy.exc import OperationalError

from governor.entities.group import GroupNotFoundException
from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from tests.setup import SetupTest


def test_create_group(setup):
    # type: (SetupTest) -> None
    group_repository = setup.repository_factory.create_group_repository()
    with setup.transaction():
        group_id = group_repository.create_group("Site Reliability")
        other_id = group_repository.create_group("Security", slug="sec")

    group = group_repository.get_group(group_id)
    assert group
    assert group.name == "Site Reliability"
    assert group.slug == "site-reliability"
    assert not group.deleted
    other = group_repository.get_group(other_id)
    assert other and other.slug == "sec"
    assert group_repository.get_group("unknown") is None


def test_fetch_groups_by_ids(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.create_group("some-group")
        setup.create_group("other-group")
        setup.create_group("deleted-group")
        setup.delete_group("deleted-group")
    group_repository = setup.repository_factory.create_group_repository()

    ids = [setup.group_id(n) for n in ("some-group", "other-group", "deleted-group")]
    groups = group_repository.fetch_groups_by_ids(ids + ["unknown", ids[0]])
    assert sorted(g.name for g in groups) == ["other-group", "some-group"]
    assert group_repository.fetch_groups_by_ids([]) == []

    # The deleted group is still there for direct lookups.
    deleted = group_repository.get_group(setup.group_id("deleted-group"))
    assert deleted and deleted.deleted


def test_delete_unknown_group(setup):
    # type: (SetupTest) -> None
    group_repository = setup.repository_factory.create_group_repository()
    with pytest.raises(GroupNotFoundException):
        group_repository.delete_group("unknown")


def test_storage_failure(setup):
    # type: (SetupTest) -> None
    group_repository = setup.repository_factory.create_group_repository()
    error = OperationalError("SELECT", {}, Exception("connection reset"))
    with patch.object(setup.session, "query", side_effect=error):
        with pytest.raises(RepositoryUnavailableException) as e:
            group_repository.get_group("some-id")
    assert "connection reset" in str(e.value)


def test_delete_group_drops_memberships(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_user_to_group("gary@a.co", "some-group")
        setup.add_user_to_group("gary@a.co", "other-group")
        setup.delete_group("some-group")
    group_membership_repository = setup.repository_factory.create_group_membership_repository()

    memberships = group_membership_repository.list_direct_memberships()
    assert [m.group_id for m in memberships] == [setup.group_id("other-group")]

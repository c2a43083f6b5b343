from typing import TYPE_CHECKING

import pytest

from governor.cancellation import Cancellation
from governor.entities.group import GroupNotFoundException
from governor.entities.group_hierarchy import GroupHierarchyExistsException
from governor.exc import OperationCancelledException
from governor.services.group_hierarchy import has_cycle

if TYPE_CHECKING:
    from tests.setup import SetupTest


def create_chain(setup):
    # type: (SetupTest) -> None
    """a contains b which contains c, and d stands alone."""
    with setup.transaction():
        setup.add_group_to_group("b", "a")
        setup.add_group_to_group("c", "b")
        setup.create_group("d")


def test_would_create_cycle(setup):
    # type: (SetupTest) -> None
    create_chain(setup)
    service = setup.service_factory.create_group_hierarchy_service()
    a, b, c, d = (setup.group_id(name) for name in ("a", "b", "c", "d"))

    assert service.would_create_cycle(c, a)
    assert service.would_create_cycle(b, a)
    assert service.would_create_cycle(c, b)
    assert not service.would_create_cycle(a, d)
    assert not service.would_create_cycle(d, a)
    assert not service.would_create_cycle(a, c)


def test_self_nesting_is_cycle(setup):
    # type: (SetupTest) -> None
    create_chain(setup)
    service = setup.service_factory.create_group_hierarchy_service()

    assert service.would_create_cycle(setup.group_id("d"), setup.group_id("d"))
    assert service.would_create_cycle("unknown", "unknown")


def test_unknown_group(setup):
    # type: (SetupTest) -> None
    create_chain(setup)
    service = setup.service_factory.create_group_hierarchy_service()

    with pytest.raises(GroupNotFoundException) as e:
        service.would_create_cycle(setup.group_id("a"), "unknown")
    assert e.value.group_id == "unknown"
    with pytest.raises(GroupNotFoundException):
        service.would_create_cycle("unknown", setup.group_id("a"))


def test_deleted_group_ignored(setup):
    # type: (SetupTest) -> None
    create_chain(setup)
    with setup.transaction():
        setup.delete_group("b")
    service = setup.service_factory.create_group_hierarchy_service()

    # The path from a to c ran through b.
    assert not service.would_create_cycle(setup.group_id("c"), setup.group_id("a"))
    with pytest.raises(GroupNotFoundException):
        service.would_create_cycle(setup.group_id("c"), setup.group_id("b"))


def test_scenario_cycle_rejected(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_group_to_group("g2", "g1")
        setup.add_group_to_group("g3", "g2")
        setup.add_user_to_group("u1@a.co", "g1", is_admin=True)
    service = setup.service_factory.create_group_hierarchy_service()

    assert service.would_create_cycle(setup.group_id("g3"), setup.group_id("g1"))


def test_add_member_group_exists(setup):
    # type: (SetupTest) -> None
    create_chain(setup)
    service = setup.service_factory.create_group_hierarchy_service()

    with pytest.raises(GroupHierarchyExistsException):
        service.add_member_group(setup.group_id("a"), setup.group_id("b"))


def test_has_cycle():
    # type: () -> None
    assert has_cycle({"a": ["b"], "b": ["a"]})
    assert has_cycle({"a": ["a"]})
    assert has_cycle({"a": ["b"], "b": ["c"], "c": ["d"], "d": ["b"]})
    assert not has_cycle({})
    assert not has_cycle({"a": ["b", "c"], "b": ["d"], "c": ["d"]})
    assert not has_cycle({"a": ["b"], "c": ["b"], "b": []})


def test_has_cycle_cancelled():
    # type: () -> None
    cancellation = Cancellation()
    cancellation.cancel()

    with pytest.raises(OperationCancelledException):
        has_cycle({"a": ["b"]}, cancellation)

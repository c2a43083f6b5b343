from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from governor.entities.group_hierarchy import HierarchyEdge
from tests.ctl_util import run_ctl

if TYPE_CHECKING:
    from tests.setup import SetupTest


def test_hierarchy_add_update_remove(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.create_group("department")
        setup.create_group("team")
    department = setup.group_id("department")
    team = setup.group_id("team")
    group_hierarchy_repository = setup.repository_factory.create_group_hierarchy_repository()

    run_ctl(setup, "hierarchy", "add", "--expires", "2030-01-01", department, team)
    assert group_hierarchy_repository.list_hierarchy_edges() == [
        HierarchyEdge(department, team, datetime(2030, 1, 1))
    ]

    run_ctl(setup, "hierarchy", "update", department, team)
    assert group_hierarchy_repository.list_hierarchy_edges() == [HierarchyEdge(department, team)]

    run_ctl(setup, "hierarchy", "remove", department, team)
    assert group_hierarchy_repository.list_hierarchy_edges() == []

    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "hierarchy", "remove", department, team)
    assert e.value.code == 1


def test_hierarchy_add_cycle(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
    department = setup.group_id("department")
    team = setup.group_id("team")

    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "hierarchy", "add", team, department)
    assert e.value.code == 1

    group_hierarchy_repository = setup.repository_factory.create_group_hierarchy_repository()
    assert not group_hierarchy_repository.hierarchy_exists(team, department)


def test_hierarchy_check_cycle(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
        setup.create_group("other-team")
    department = setup.group_id("department")
    team = setup.group_id("team")

    run_ctl(setup, "hierarchy", "check-cycle", department, setup.group_id("other-team"))
    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "hierarchy", "check-cycle", team, department)
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "hierarchy", "check-cycle", team, "unknown")
    assert e.value.code == 1


def test_invalid_date(setup):
    # type: (SetupTest) -> None
    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "hierarchy", "add", "--expires", "next tuesday", "a", "b")
    assert e.value.code == 2

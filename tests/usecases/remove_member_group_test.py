from typing import TYPE_CHECKING

from mock import ANY, call, MagicMock

from governor.entities.membership import EnumeratedMembership

if TYPE_CHECKING:
    from tests.setup import SetupTest


def test_remove_member_group(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
        setup.add_group_to_group("department", "company")
        setup.add_user_to_group("gary@a.co", "team")
        setup.add_user_to_group("zorkian@a.co", "team")
        setup.add_user_to_group("zorkian@a.co", "department", is_admin=True)
    company = setup.group_id("company")
    department = setup.group_id("department")
    team = setup.group_id("team")

    mock_ui = MagicMock()
    usecase = setup.usecase_factory.create_remove_member_group_usecase(mock_ui)
    usecase.remove_member_group(department, team)
    assert mock_ui.mock_calls == [call.removed_member_group(department, team, ANY)]

    # zorkian keeps department and company through the direct membership.
    gary = setup.user_id("gary@a.co")
    members_removed = mock_ui.removed_member_group.call_args[0][2]
    assert set(members_removed) == {
        EnumeratedMembership(department, gary, False, None, False),
        EnumeratedMembership(company, gary, False, None, False),
    }

    membership_service = setup.service_factory.create_membership_service()
    assert [m.group_id for m in membership_service.enumerate_for_user(gary)] == [team]


def test_remove_member_group_not_found(setup):
    # type: (SetupTest) -> None
    with setup.transaction():
        setup.create_group("department")
        setup.create_group("team")
    department = setup.group_id("department")
    team = setup.group_id("team")

    mock_ui = MagicMock()
    usecase = setup.usecase_factory.create_remove_member_group_usecase(mock_ui)
    usecase.remove_member_group(department, team)
    assert mock_ui.mock_calls == [call.remove_member_group_failed_not_found(department, team)]

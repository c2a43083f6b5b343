from typing import TYPE_CHECKING

import pytest

from tests.ctl_util import run_ctl

if TYPE_CHECKING:
    from _pytest.capture import CaptureFixture
    from tests.setup import SetupTest


def test_user_groups(setup, capsys):
    # type: (SetupTest, CaptureFixture) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
        setup.add_user_to_group("gary@a.co", "team", is_admin=True)

    run_ctl(setup, "user", "groups", setup.user_id("gary@a.co"))
    lines = sorted(capsys.readouterr().out.splitlines())
    assert lines == sorted(
        [
            "\t".join([setup.group_id("department"), "department", "inherited", "member", "never"]),
            "\t".join([setup.group_id("team"), "team", "direct", "admin", "never"]),
        ]
    )


def test_user_groups_not_found(setup):
    # type: (SetupTest) -> None
    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "user", "groups", "unknown")
    assert e.value.code == 1

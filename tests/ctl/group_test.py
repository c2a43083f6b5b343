from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from tests.ctl_util import run_ctl

if TYPE_CHECKING:
    from _pytest.capture import CaptureFixture
    from tests.setup import SetupTest


def test_group_members(setup, capsys):
    # type: (SetupTest, CaptureFixture) -> None
    with setup.transaction():
        setup.add_group_to_group("team", "department")
        setup.add_user_to_group("gary@a.co", "team")
        setup.add_user_to_group(
            "zorkian@a.co", "department", is_admin=True, expires_at=datetime(2030, 1, 2, 15, 30)
        )

    run_ctl(setup, "group", "members", setup.group_id("department"))
    lines = sorted(capsys.readouterr().out.splitlines())
    assert lines == sorted(
        [
            "\t".join([setup.user_id("gary@a.co"), "gary@a.co", "inherited", "member", "never"]),
            "\t".join(
                [
                    setup.user_id("zorkian@a.co"),
                    "zorkian@a.co",
                    "direct",
                    "admin",
                    "2030-01-02 03:30 PM",
                ]
            ),
        ]
    )


def test_group_members_not_found(setup):
    # type: (SetupTest) -> None
    with pytest.raises(SystemExit) as e:
        run_ctl(setup, "group", "members", "unknown")
    assert e.value.code == 1

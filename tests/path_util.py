import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from py._path.local import LocalPath


def src_path(*args):
    # type: (*str) -> str
    root = os.path.join(__file__, "..", "..")
    path = os.path.join(root, *args)
    return os.path.normpath(path)


def db_url(tmpdir):
    # type: (LocalPath) -> str
    if "GOVERNOR_TEST_DATABASE" in os.environ:
        return os.environ["GOVERNOR_TEST_DATABASE"]
    db_path = tmpdir.join("governor.sqlite")
    return "sqlite:///{}".format(db_path)

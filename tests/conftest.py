from typing import TYPE_CHECKING

import pytest

from tests.setup import SetupTest

if TYPE_CHECKING:
    from py._path.local import LocalPath
    from typing import Iterator


@pytest.fixture
def setup(tmpdir):
    # type: (LocalPath) -> Iterator[SetupTest]
    setup = SetupTest(tmpdir)
    yield setup
    setup.close()

from argparse import Namespace

from governor.util import get_loglevel, singleton, slugify


def test_slugify():
    # type: () -> None
    assert slugify("Site Reliability") == "site-reliability"
    assert slugify("  R&D / Infra  ") == "r-d-infra"
    assert slugify("team-42") == "team-42"


def test_get_loglevel():
    # type: () -> None
    assert get_loglevel(Namespace(verbose=0, quiet=0), base=20) == 20
    assert get_loglevel(Namespace(verbose=1, quiet=0), base=20) == 10
    assert get_loglevel(Namespace(verbose=0, quiet=2), base=20) == 40


def test_singleton():
    # type: () -> None
    calls = []

    @singleton
    def make():
        # type: () -> object
        calls.append(1)
        return object()

    assert make() is make()
    assert len(calls) == 1

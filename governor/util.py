import functools
import logging
import re
import threading
from typing import TYPE_CHECKING, TypeVar

from governor.constants import SLUG_INVALID_CHARACTERS

if TYPE_CHECKING:
    from argparse import Namespace
    from typing import Any, Callable, Optional

T = TypeVar("T")


def get_loglevel(args, base=None):
    # type: (Namespace, Optional[int]) -> int
    if base is None:
        base = logging.getLogger().level
    verbose = args.verbose * 10
    quiet = args.quiet * 10
    return base - verbose + quiet


def singleton(f):
    # type: (Callable[[], T]) -> Callable[[], T]
    """Thread-safe global singleton.

    Decorator which ensures that a function (with no arguments) is only called once, and then all
    subsequent calls return the same cached value.
    """
    lock = threading.Lock()
    cache = []  # type: Any

    @functools.wraps(f)
    def wrapper():
        # type: () -> T
        if not cache:
            with lock:
                if not cache:
                    cache.append(f())
        return cache[0]

    return wrapper


def slugify(name):
    # type: (str) -> str
    """Return the URL-safe slug for a group name ("SRE Team" becomes "sre-team")."""
    return re.sub(SLUG_INVALID_CHARACTERS, "-", name.lower()).strip("-")

import logging
import os
from typing import TYPE_CHECKING
from urllib.parse import urlparse

import pytz
import yaml

if TYPE_CHECKING:
    from pytz import BaseTzInfo
    from typing import Any, Dict, Optional
    from urllib.parse import ParseResult

SETTINGS_ENV_VAR = "GOVERNOR_SETTINGS"
DEFAULT_SETTINGS_PATH = "/etc/governor.yaml"


def default_settings_path():
    # type: () -> str
    return os.environ.get(SETTINGS_ENV_VAR, DEFAULT_SETTINGS_PATH)


class InvalidSettingsError(Exception):
    """The configuration is missing a required setting or has one with an unusable value."""

    pass


class Settings:
    """Configuration shared by every Governor entry point.

    Values come from a YAML file with a "common" section read by everyone and optional
    per-application sections layered on top of it.  Subclasses add their own attributes and pick
    their section; any key in the file without a matching attribute is skipped.
    """

    def __init__(self):
        # type: () -> None
        self._logger = logging.getLogger(__name__)

        # Same order as config/dev.yaml.
        self.database = ""
        self.date_format = "%Y-%m-%d %I:%M %p"
        self.timezone = "UTC"  # type: ignore[assignment]  # mypy/issues/3004
        self.enumeration_timeout = 0  # type: float
        self.log_format = "%(asctime)-15s\t%(levelname)s\t%(message)s  [%(name)s]"

    @property
    def timezone(self):
        # type: () -> BaseTzInfo
        return self._timezone

    @timezone.setter
    def timezone(self, name):
        # type: (str) -> None
        self._timezone = pytz.timezone(name)

    def update_from_config(self, filename=None, section=None):
        # type: (Optional[str], Optional[str]) -> None
        """Read filename (default from GOVERNOR_SETTINGS) and apply common, then section.

        Raises InvalidSettingsError if the result has no database or a negative
        enumeration_timeout.
        """
        if not filename:
            filename = default_settings_path()
        self._logger.debug("Reading settings from %s", filename)
        for key, value in self._read_sections(filename, section).items():
            self._apply(key.lower(), value)

        if not self.database:
            raise InvalidSettingsError("no database configured in {}".format(filename))
        if self.enumeration_timeout < 0:
            raise InvalidSettingsError(
                "enumeration_timeout must be zero or positive, not {}".format(
                    self.enumeration_timeout
                )
            )
        self._logger.debug("Using database %s", self.db_connection_info().geturl())

    @staticmethod
    def _read_sections(filename, section):
        # type: (str, Optional[str]) -> Dict[str, Any]
        with open(filename) as config:
            data = yaml.safe_load(config) or {}
        values = dict(data.get("common") or {})
        if section:
            values.update(data.get(section) or {})
        return values

    def _apply(self, key, value):
        # type: (str, Any) -> None
        if key.startswith("_"):
            self._logger.warning("Refusing to set private setting %s", key)
        elif hasattr(self, key):
            setattr(self, key, value)
        else:
            self._logger.debug("Skipping unknown setting %s", key)

    def db_connection_info(self):
        # type: () -> ParseResult
        """The database URL with any password replaced, for logging."""
        url = urlparse(self.database)
        if url.password is None:
            return url
        host = url.netloc.rsplit("@", 1)[-1]
        return url._replace(netloc=f"{url.username}:<REDACTED>@{host}")

from typing import TYPE_CHECKING

from governor.settings import Settings

if TYPE_CHECKING:
    from typing import Optional


class CtlSettings(Settings):
    """governor-ctl settings."""

    @staticmethod
    def from_config(filename=None, section="ctl"):
        # type: (Optional[str], Optional[str]) -> CtlSettings
        settings = CtlSettings()
        settings.update_from_config(filename, section)
        return settings

    def update_from_config(self, filename=None, section="ctl"):
        # type: (Optional[str], Optional[str]) -> None
        super().update_from_config(filename, section)

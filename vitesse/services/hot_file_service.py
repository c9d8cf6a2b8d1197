import logging
from os import path
from typing import Optional

from vitesse.misc.utils import file_content
from vitesse.models.vite_mode import ViteMode

log = logging.getLogger(__name__)


class HotFileService:
    """
    The Vite dev server writes its base url to the hot file while it is
    running. Presence of that file switches the tags to hot mode.
    """

    def __init__(self, hot_file_path: str):
        self._hot_file_path = hot_file_path

    @property
    def hot_file_path(self) -> str:
        return self._hot_file_path

    def is_hot(self) -> bool:
        return path.isfile(self._hot_file_path)

    def hot_content(self) -> Optional[str]:
        if not self.is_hot():
            return None
        try:
            content = file_content(self._hot_file_path)
        except (OSError, UnicodeDecodeError) as exception:
            log.warning(
                "Unable to read hot file %s, using build assets instead: %s",
                self._hot_file_path,
                exception,
            )
            return None
        if content is None:
            return None
        return content.rstrip()

    def mode(self) -> ViteMode:
        return ViteMode.from_hot_content(self.hot_content())

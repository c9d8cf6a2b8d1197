from os import path

from pydantic import BaseModel

from vitesse.constants import HOT_FILE_NAME, BUILD_DIRECTORY
from vitesse.misc.utils import manifest_path


class ViteConfig(BaseModel):
    hot_file_name: str = HOT_FILE_NAME
    build_directory: str = BUILD_DIRECTORY
    base_path: str = "."

    @property
    def hot_file_path(self) -> str:
        return path.join(self.base_path, self.hot_file_name)

    @property
    def manifest_path(self) -> str:
        return manifest_path(self.base_path, self.build_directory)

    @property
    def build_path(self) -> str:
        return path.join(self.base_path, self.build_directory)

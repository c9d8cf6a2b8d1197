from typing import List, Any

from pydantic import BaseModel, field_validator

from vitesse.constants import HOT_FILE_NAME, BUILD_DIRECTORY, FILES_SEPARATOR


class ViteTagsRequest(BaseModel):
    files: List[str]
    hot_file_name: str = HOT_FILE_NAME
    build_directory: str = BUILD_DIRECTORY

    @field_validator("files", mode="before")
    def split_files(cls, files: Any) -> Any:  # pylint: disable=no-self-argument
        """
        Accepts "a.css|b.js" as well as a list; blank entries are dropped
        and the order of the remaining entries is kept.
        """
        if files is None:
            return []
        if isinstance(files, str):
            files = files.split(FILES_SEPARATOR)
        stripped = [file.strip() if isinstance(file, str) else file for file in files]
        return [file for file in stripped if file != ""]

import json
from os import path
from typing import Union, Any, Optional

from vitesse.constants import MANIFEST_FILE_NAME


def file_content(filepath: str) -> Union[str, None]:
    if filepath is not None and path.exists(filepath):
        with open(filepath, "r", encoding="utf-8") as file:
            return file.read()
    return None


def file_content_raise_if_none(filepath: str) -> str:
    optional_file_content = file_content(filepath)
    if optional_file_content is None:
        raise ValueError(f"file_content for {filepath} shouldn't be None")
    return optional_file_content


def json_from_file(filepath: str) -> Any:
    return json.loads(file_content_raise_if_none(filepath))


def manifest_path(base_path: str, build_directory: str) -> str:
    return path.join(base_path, build_directory, MANIFEST_FILE_NAME)


def file_extension(file_name: str) -> str:
    """
    Text after the final dot of the last path segment, "" if there is none.
    """
    base_name = file_name.rsplit("/", 1)[-1]
    if "." not in base_name:
        return ""
    return base_name.rsplit(".", 1)[1]


def contained_path(base_path: str, relative_path: str) -> Optional[str]:
    """
    Joins relative_path onto base_path. Returns None when the resolved
    path ends up outside base_path.
    """
    base = path.realpath(base_path)
    candidate = path.realpath(path.join(base, relative_path))
    if path.commonpath([base, candidate]) != base:
        return None
    return candidate

import json
from configparser import ConfigParser
from pathlib import Path
from typing import Any, Callable

import pytest

from tests.utils import HOT_BASE_URL

TESTS_PATH = Path(__file__).parent


@pytest.fixture
def config(tmp_path) -> ConfigParser:
    config = ConfigParser()
    config.read(TESTS_PATH / "vitesse.test.conf")
    config["app"]["base_path"] = str(tmp_path)
    config["templates"]["jinja_path"] = str(TESTS_PATH.parent / "templates")
    return config


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., Path]:
    def _write(manifest: Any = None, build_directory: str = "build") -> Path:
        directory = tmp_path / build_directory
        directory.mkdir(parents=True, exist_ok=True)
        manifest_file = directory / "manifest.json"
        content = manifest if isinstance(manifest, str) else json.dumps(manifest)
        manifest_file.write_text(content, encoding="utf-8")
        return manifest_file

    return _write


@pytest.fixture
def write_hot_file(tmp_path) -> Callable[..., Path]:
    def _write(content: str = HOT_BASE_URL, hot_file_name: str = "hot") -> Path:
        hot_file = tmp_path / hot_file_name
        hot_file.write_text(content, encoding="utf-8")
        return hot_file

    return _write

import logging
from os import path
from typing import Dict, Any

from vitesse.misc.utils import json_from_file

log = logging.getLogger(__name__)

Manifest = Dict[str, Dict[str, Any]]


def load_manifest(filepath: str) -> Manifest:
    if not path.isfile(filepath):
        log.debug("No manifest found at %s", filepath)
        return {}

    try:
        manifest = json_from_file(filepath)
    except (OSError, UnicodeDecodeError, ValueError) as exception:
        log.warning("Unable to load manifest %s: %s", filepath, exception)
        return {}

    if not isinstance(manifest, dict):
        log.warning("Manifest %s does not contain a JSON object", filepath)
        return {}
    return manifest


class ViteManifestService:
    def __init__(self, manifest: Manifest):
        self.manifest = manifest

    @classmethod
    def from_file(cls, filepath: str) -> "ViteManifestService":
        return cls(load_manifest(filepath))

    def get_manifest(self) -> Manifest:
        return self.manifest

    def get_asset_url(self, input_path: str) -> str:
        entry = self.manifest.get(input_path)
        if not isinstance(entry, dict):
            return ""

        asset_file = entry.get("file")
        return asset_file if isinstance(asset_file, str) else ""

import logging
from os import path
from typing import List, Optional, Sequence, Union

from markupsafe import escape

from vitesse.constants import (
    HOT_FILE_NAME,
    BUILD_DIRECTORY,
    MANIFEST_FILE_NAME,
    VITE_CLIENT_PATH,
)
from vitesse.misc.utils import contained_path, file_extension
from vitesse.models.enums import AssetKind
from vitesse.models.vite_mode import ViteMode
from vitesse.models.vite_tags_request import ViteTagsRequest
from vitesse.services.hot_file_service import HotFileService
from vitesse.services.vite_manifest_service import ViteManifestService

log = logging.getLogger(__name__)

STYLESHEET_TAG = '<link rel="stylesheet" href="{url}" />'
SCRIPT_TAG = '<script type="module" src="{url}"></script>'


def render_tag(asset_kind: AssetKind, url: str) -> str:
    template = STYLESHEET_TAG if asset_kind == AssetKind.STYLESHEET else SCRIPT_TAG
    return template.format(url=escape(url))


def asset_url(
    file: str,
    mode: ViteMode,
    manifest_service: ViteManifestService,
    build_directory: str,
) -> str:
    if mode.hot:
        return f"{mode.hot_base_url}/{file}"
    return f"{build_directory}/{manifest_service.get_asset_url(file)}"


def generate_tags(
    files: Sequence[str],
    mode: ViteMode,
    manifest_service: ViteManifestService,
    build_directory: str,
) -> List[str]:
    tags = []
    for file in files:
        asset_kind = AssetKind.from_extension(file_extension(file))
        if asset_kind is None:
            log.debug("Skipping %s, only css and js files get a tag", file)
            continue
        url = asset_url(file, mode, manifest_service, build_directory)
        tags.append(render_tag(asset_kind, url))

    if mode.hot:
        tags.append(
            render_tag(AssetKind.SCRIPT, f"{mode.hot_base_url}/{VITE_CLIENT_PATH}")
        )
    return tags


class ViteTagService:
    """
    Resolves logical asset names to <link> and <script> tags. Holds no state
    besides the base path the hot file and build directory live under.
    """

    def __init__(self, base_path: str = "."):
        self._base_path = base_path

    def hot_file_service(self, hot_file_name: str) -> Optional[HotFileService]:
        hot_file_path = contained_path(self._base_path, hot_file_name)
        if hot_file_path is None:
            log.warning(
                "Hot file %s is outside %s, ignoring it",
                hot_file_name,
                self._base_path,
            )
            return None
        return HotFileService(hot_file_path)

    def manifest_service(self, build_directory: str) -> ViteManifestService:
        manifest_file = contained_path(
            self._base_path, path.join(build_directory, MANIFEST_FILE_NAME)
        )
        if manifest_file is None:
            log.warning(
                "Build directory %s is outside %s, ignoring its manifest",
                build_directory,
                self._base_path,
            )
            return ViteManifestService({})
        return ViteManifestService.from_file(manifest_file)

    def resolve(self, request: ViteTagsRequest) -> Optional[str]:
        if not request.files:
            return None

        hot_file_service = self.hot_file_service(request.hot_file_name)
        if hot_file_service is None:
            mode = ViteMode.production()
        else:
            mode = hot_file_service.mode()

        if mode.hot:
            manifest_service = ViteManifestService({})
        else:
            manifest_service = self.manifest_service(request.build_directory)

        return "".join(
            generate_tags(
                request.files, mode, manifest_service, request.build_directory
            )
        )


def resolve(
    files: Union[str, Sequence[str], None],
    hot_file_name: str = HOT_FILE_NAME,
    build_directory: str = BUILD_DIRECTORY,
    base_path: str = ".",
) -> Optional[str]:
    request = ViteTagsRequest(
        files=files, hot_file_name=hot_file_name, build_directory=build_directory
    )
    return ViteTagService(base_path).resolve(request)

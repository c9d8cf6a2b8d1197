# pylint: disable=c-extension-no-member
from typing import Optional

from dependency_injector import containers, providers

from vitesse.constants import HOT_FILE_NAME, BUILD_DIRECTORY
from vitesse.models.vite_config import ViteConfig
from vitesse.services.hot_file_service import HotFileService
from vitesse.services.template_service import TemplateService
from vitesse.services.vite_manifest_service import ViteManifestService
from vitesse.services.vite_tag_service import ViteTagService


def _vite_config_factory(
    hot_file_name: Optional[str],
    build_directory: Optional[str],
    base_path: Optional[str],
) -> ViteConfig:
    return ViteConfig(
        hot_file_name=hot_file_name or HOT_FILE_NAME,
        build_directory=build_directory or BUILD_DIRECTORY,
        base_path=base_path or ".",
    )


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    vite_config = providers.Singleton(
        _vite_config_factory,
        hot_file_name=config.vite.hot_file_name,
        build_directory=config.vite.build_directory,
        base_path=config.app.base_path,
    )

    hot_file_service = providers.Singleton(
        HotFileService,
        hot_file_path=vite_config.provided.hot_file_path,
    )

    vite_tag_service = providers.Singleton(
        ViteTagService,
        base_path=vite_config.provided.base_path,
    )

    vite_manifest_service = providers.Singleton(
        ViteManifestService.from_file,
        filepath=vite_config.provided.manifest_path,
    )

    template_service = providers.Singleton(
        TemplateService,
        jinja_template_directory=config.templates.jinja_path,
        vite_tag_service=vite_tag_service,
        vite_manifest_service=vite_manifest_service,
        hot_file_name=vite_config.provided.hot_file_name,
        build_directory=vite_config.provided.build_directory,
    )

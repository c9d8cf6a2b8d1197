from typing import Optional, Sequence, Union

from markupsafe import Markup

from fastapi.templating import Jinja2Templates

from vitesse.constants import HOT_FILE_NAME, BUILD_DIRECTORY
from vitesse.models.vite_tags_request import ViteTagsRequest
from vitesse.services.vite_manifest_service import ViteManifestService
from vitesse.services.vite_tag_service import ViteTagService


class TemplateService:
    def __init__(
        self,
        jinja_template_directory: str,
        vite_tag_service: Optional[ViteTagService] = None,
        vite_manifest_service: Optional[ViteManifestService] = None,
        hot_file_name: str = HOT_FILE_NAME,
        build_directory: str = BUILD_DIRECTORY,
    ):
        self.vite_tag_service = vite_tag_service
        self.vite_manifest_service = vite_manifest_service
        self._hot_file_name = hot_file_name
        self._build_directory = build_directory

        self._templates = Jinja2Templates(directory=jinja_template_directory)

        if self.vite_tag_service is not None:
            self._templates.env.globals["vite_tags"] = self.vite_tags

        if self.vite_manifest_service is not None:
            self._templates.env.globals["vite_asset"] = (
                self.vite_manifest_service.get_asset_url
            )

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def vite_tags(
        self,
        files: Union[str, Sequence[str], None],
        hot_file_name: Optional[str] = None,
        build_directory: Optional[str] = None,
    ) -> Markup:
        if self.vite_tag_service is None:
            raise RuntimeError("No ViteTagService configured")

        request = ViteTagsRequest(
            files=files,
            hot_file_name=hot_file_name or self._hot_file_name,
            build_directory=build_directory or self._build_directory,
        )
        tags = self.vite_tag_service.resolve(request)
        return Markup(tags if tags is not None else "")

    def render(self, template_name: str, **context) -> str:
        return self.templates.get_template(template_name).render(**context)

from typing import Optional

from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends
from starlette.responses import HTMLResponse, Response

from vitesse.dependency_injection.config import RouterConfig
from vitesse.models.vite_config import ViteConfig
from vitesse.models.vite_tags_request import ViteTagsRequest
from vitesse.services.vite_tag_service import ViteTagService

vite_router = APIRouter()


@vite_router.get(RouterConfig.vite_tags_endpoint, response_class=HTMLResponse)
@inject
async def vite_tags(
    files: Optional[str] = None,
    hot_file_name: Optional[str] = None,
    build_directory: Optional[str] = None,
    vite_config: ViteConfig = Depends(Provide["services.vite_config"]),
    vite_tag_service: ViteTagService = Depends(Provide["services.vite_tag_service"]),
) -> Response:
    request = ViteTagsRequest(
        files=files,
        hot_file_name=hot_file_name or vite_config.hot_file_name,
        build_directory=build_directory or vite_config.build_directory,
    )
    tags = vite_tag_service.resolve(request)
    if tags is None:
        return Response(status_code=204)
    return HTMLResponse(content=tags)

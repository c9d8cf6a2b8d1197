from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from vitesse.dependency_injection.config import RouterConfig
from vitesse.services.hot_file_service import HotFileService

misc_router = APIRouter()


@misc_router.get(RouterConfig.health_endpoint)
@inject
async def health(
    hot_file_service: HotFileService = Depends(Provide["services.hot_file_service"]),
) -> JSONResponse:
    mode = hot_file_service.mode()
    response = {
        "healthy": True,
        "mode": "hot" if mode.hot else "production",
        "hot_base_url": mode.hot_base_url,
    }

    return JSONResponse(content=jsonable_encoder(response), status_code=200)

# pylint: disable=c-extension-no-member
import logging
from configparser import ConfigParser
from typing import Type, Union, Callable, Tuple, List

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.exceptions import RequestValidationError

from vitesse.dependency_injection.config import get_config
from vitesse.dependency_injection.container import Container
from vitesse.exceptions.exception_handlers import general_exception_handler
from vitesse.routers.misc_router import misc_router
from vitesse.routers.vite_router import vite_router

log = logging.getLogger(__name__)

_exception_handlers: List[Tuple[Union[int, Type[Exception]], Callable]] = [
    (Exception, general_exception_handler),
    (RequestValidationError, general_exception_handler),
]


def kwargs_from_config():
    config = get_config()

    kwargs = {
        "host": config.get("uvicorn", "host"),
        "port": config.getint("uvicorn", "port"),
        "reload": config.getboolean("uvicorn", "reload"),
        "proxy_headers": True,
        "workers": config.getint("uvicorn", "workers"),
    }

    reload_includes = config.get("uvicorn", "reload_includes", fallback=None)
    if reload_includes is not None and reload_includes != "":
        kwargs["reload_includes"] = reload_includes.split(" ")
    return kwargs


def _add_exception_handlers(fastapi: FastAPI):
    for tup in _exception_handlers:
        fastapi.add_exception_handler(tup[0], tup[1])


def run():
    uvicorn.run(
        "vitesse.application:create_fastapi_app", factory=True, **kwargs_from_config()
    )


def create_fastapi_app(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> FastAPI:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    loglevel = logging.getLevelName(_config.get("app", "loglevel").upper())

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel.upper()}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    modules = [
        "vitesse.routers.vite_router",
        "vitesse.routers.misc_router",
    ]
    container.config.from_dict(
        {section: dict(_config[section]) for section in _config.sections()}
    )

    vite_config = container.services.vite_config()
    log.info(
        "Serving Vite assets from %s, hot file %s",
        vite_config.build_path,
        vite_config.hot_file_path,
    )

    fastapi = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    fastapi.include_router(vite_router)
    fastapi.include_router(misc_router)
    fastapi.mount(
        "/" + vite_config.build_directory.strip("/"),
        StaticFiles(directory=vite_config.build_path, check_dir=False),
        name="build",
    )
    container.wire(modules=modules)
    fastapi.container = container  # type: ignore
    _add_exception_handlers(fastapi)
    return fastapi

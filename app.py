from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI

from dotenv import load_dotenv

from host import Host
from persistence import DiskOptionsBackend, InMemoryOptionsBackend

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Host "ready" phase: plugins hooked on "init" run once per app start.
    host = app.state.host
    host.do_action("init")
    logger.info("HOST READY: init fired (%d)", host.did_action("init"))
    yield


def build_host(settings) -> Host:
    if settings.persist_to_disk:
        options = DiskOptionsBackend(settings.data_dir)
        logger.info("OPTIONS: disk backend at %s", options.directory)
    else:
        options = InMemoryOptionsBackend()
        logger.info("OPTIONS: in-memory backend (PERSIST_TO_DISK is off)")
    return Host(options, locale=settings.locale)


def create_app(settings=None) -> FastAPI:
    load_dotenv("local.env")

    import plugin
    from endpoints.config_endpoints import router as config_router
    from settings import get_settings

    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    host = build_host(settings)
    plugin.init(host)

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.host = host

    app.include_router(config_router)

    return app


app = create_app()

# config_endpoints.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from host import Host
from plugin import VERSION
from utils.config import Config

router = APIRouter(tags=["config"])
logger = logging.getLogger(__name__)


class ConfigValueIn(BaseModel):
    value: Any = None


class ConfigValueOut(BaseModel):
    key: str
    value: Any = None


class ConfigSaveOut(ConfigValueOut):
    saved: bool


def get_host(request: Request) -> Host:
    return request.app.state.host


def get_config(request: Request) -> Config:
    """
    A fresh Config per request: each request reads the persisted option once
    and never shares its cache with another request.
    """
    host = get_host(request)
    if request.app.state.settings.debug_log_requests:
        logger.info("CONFIG REQUEST: %s %s", request.method, request.url.path)
    return Config(host.options)


@router.get("/health")
async def health(host: Host = Depends(get_host)) -> dict[str, Any]:
    return {"status": "ok", "version": VERSION, "init_fired": host.did_action("init")}


@router.get("/config")
async def read_all(config: Config = Depends(get_config)) -> dict[str, Any]:
    return config.all()


@router.get("/config/{key}", response_model=ConfigValueOut)
async def read_key(key: str, config: Config = Depends(get_config)) -> ConfigValueOut:
    if not config.has(key):
        raise HTTPException(status_code=404, detail="unknown_config_key")
    return ConfigValueOut(key=key, value=config.get(key))


@router.put("/config/{key}", response_model=ConfigSaveOut)
async def write_key(key: str, body: ConfigValueIn, config: Config = Depends(get_config)) -> ConfigSaveOut:
    if not config.set(key, body.value):
        raise HTTPException(status_code=500, detail="config_save_failed")
    return ConfigSaveOut(key=key, value=config.get(key), saved=True)

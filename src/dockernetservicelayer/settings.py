# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from dataclasses import dataclass, field
import os
from pathlib import Path

import structlog
import yaml

logger = structlog.getLogger()

DEFAULT_CONFIG_PATH = "/etc/dockernet/dockernet.yaml"
DEFAULT_NAPI_URL = "http://napi.local"


@dataclass
class NapiConfig:
    url: str = DEFAULT_NAPI_URL
    # seconds
    connect_timeout: float = 10.0
    request_timeout: float = 60.0


@dataclass
class Config:
    napi: NapiConfig = field(default_factory=NapiConfig)
    debug: bool = False


def get_config_path() -> Path:
    """Location of the dockernet configuration file."""
    return Path(os.getenv("DOCKERNET_CONFIG", DEFAULT_CONFIG_PATH))


def _load_config_file(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError:
        logger.info(
            "No configuration file found, using defaults", path=str(path)
        )
        return {}
    # if the file exists but is empty, data can be None
    return data or {}


def read_config() -> Config:
    data = _load_config_file(get_config_path())
    napi = data.get("napi") or {}
    try:
        napi_config = NapiConfig(
            url=str(napi.get("url", DEFAULT_NAPI_URL)),
            connect_timeout=float(napi.get("connect_timeout", 10.0)),
            request_timeout=float(napi.get("request_timeout", 60.0)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid napi configuration: {e}") from e

    napi_url = os.getenv("DOCKERNET_NAPI_URL")
    if napi_url:
        napi_config.url = napi_url

    return Config(napi=napi_config, debug=bool(data.get("debug", False)))

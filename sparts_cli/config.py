from enum import Enum
import configparser
from os import environ
from os.path import exists
from typing import Any
import logging

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

_PATH = "sparts{suffix}.conf"
_CONFIG = None


def _to_bool(v: Any, default: bool) -> bool:
    if v in (None, "", " "):
        return default
    if isinstance(v, str):
        return v.lower() in ("yes", "true", "t", "1")
    return bool(v)


class LogLevel(str, Enum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"
    critical = "critical"


class ConfigApp(BaseModel):
    loglevel: LogLevel = Field(default=LogLevel.warning)
    # Shows the underlying cause of ledger errors next to the error message
    debug: bool = Field(default=False)
    color: bool = Field(default=True)

    @field_validator("loglevel", mode="before")
    def validate_loglevel(cls, v: Any) -> Any:
        if v in (None, "", " "):
            return LogLevel.warning
        return v

    @field_validator("debug", mode="before")
    def validate_debug(cls, v: Any) -> bool:
        return _to_bool(v, False)

    @field_validator("color", mode="before")
    def validate_color(cls, v: Any) -> bool:
        return _to_bool(v, True)


class ConfigLedger(BaseModel):
    address: str
    timeout: int = Field(default=10, gt=0)
    retries: int = Field(default=1, ge=1)
    backoff: float = Field(default=0.5, ge=0)
    custom_header_name: str = Field(default="X-Custom-Header")
    custom_header_value: str = Field(default="myvalue")

    @field_validator("address")
    def validate_address(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ledger address cannot be empty")
        return v.rstrip("/")

    @field_validator("timeout", mode="before")
    def validate_timeout(cls, v: Any) -> int:
        if v in (None, "", " "):
            return 10
        return int(v)

    @field_validator("retries", mode="before")
    def validate_retries(cls, v: Any) -> int:
        if v in (None, "", " "):
            return 1
        return int(v)

    @field_validator("backoff", mode="before")
    def validate_backoff(cls, v: Any) -> float:
        if v in (None, "", " "):
            return 0.5
        return float(v)

    @property
    def base_url(self) -> str:
        if "://" in self.address:
            return self.address
        return f"http://{self.address}"


class ConfigAlias(BaseModel):
    path: str | None = Field(default=None)

    @field_validator("path", mode="before")
    def validate_path(cls, v: Any) -> str | None:
        if v in (None, "", " "):
            return None
        return str(v)


class Config(BaseModel):
    app: ConfigApp
    ledger: ConfigLedger
    alias: ConfigAlias


def read_ini_file(path: str) -> Any:
    ini_data = configparser.ConfigParser()
    ini_data.read(path)

    ret = {}
    for section in ini_data.sections():
        ret[section] = dict(ini_data[section])

    return ret


def reset_config() -> None:
    global _CONFIG
    _CONFIG = None


def set_config(config: Config) -> None:
    global _CONFIG
    _CONFIG = config


def get_config(path: str | None = None) -> Config:
    global _CONFIG

    if _CONFIG is not None:
        return _CONFIG

    if path is None:
        suffix = environ.get("SPARTS_ENV", "")
        if suffix:
            suffix = f".{suffix}"
        path = _PATH.replace("{suffix}", suffix)
        logger.info(f"Reading configuration using file: {path}")

    if not exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    ini_data = read_ini_file(path)
    # app and alias are optional sections, everything in them has a default
    ini_data.setdefault("app", {})
    ini_data.setdefault("alias", {})

    try:
        _CONFIG = Config(**ini_data)
    except ValidationError as e:
        logger.error(f"Configuration validation error: {e}")
        raise e

    return _CONFIG

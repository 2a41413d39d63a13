from __future__ import annotations
import os, sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_ENV = "LSTREE_CONFIG"
DEFAULT_CONFIG_TOML = "lstree.toml"

# shared by env overrides and the -s/--sort flag
BOOL_VALUES = {
    "true": True, "1": True, "yes": True, "on": True,
    "false": False, "0": False, "no": False, "off": False,
}


class ConfigError(Exception):
    pass


class AppSettings(BaseModel):
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.strip().upper() or "WARNING"


class RenderSettings(BaseModel):
    x_spacing: int = Field(3, ge=0)
    y_spacing: int = Field(1, ge=0)
    sort: bool = True
    ignore: List[str] = Field(default_factory=list)
    # the root directory itself is not part of the directory total unless asked
    count_root: bool = False


class Settings(BaseModel):
    app: AppSettings = AppSettings()
    render: RenderSettings = RenderSettings()


def parse_bool(raw: str) -> bool:
    val = raw.strip().lower()
    if val in BOOL_VALUES:
        return BOOL_VALUES[val]
    raise ValueError(f"not a boolean: {raw!r}")


def _read_toml(path: Path, required: bool) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc


def _env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    app = dict(data.get("app", {}))
    level = os.getenv("LSTREE_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if level:
        app["log_level"] = level
    data["app"] = app

    render = dict(data.get("render", {}))
    for key in ("x_spacing", "y_spacing"):
        raw = os.getenv(f"LSTREE_{key.upper()}")
        if raw is not None and raw.strip():
            render[key] = raw.strip()
    for key in ("sort", "count_root"):
        raw = os.getenv(f"LSTREE_{key.upper()}")
        if raw is not None and raw.strip():
            try:
                render[key] = parse_bool(raw)
            except ValueError as exc:
                raise ConfigError(f"LSTREE_{key.upper()}: {exc}") from exc
    raw = os.getenv("LSTREE_IGNORE")
    if raw:
        render["ignore"] = [name.strip() for name in raw.split(",") if name.strip()]
    data["render"] = render
    return data


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build settings from (lowest to highest precedence):
      defaults → TOML file → environment (a .env file is loaded first).
    The TOML file is `config_path`, else $LSTREE_CONFIG, else ./lstree.toml;
    only an explicitly named file has to exist.
    """
    load_dotenv(find_dotenv(usecwd=True))

    explicit = config_path or os.getenv(CONFIG_ENV)
    path = Path(explicit or DEFAULT_CONFIG_TOML)
    data = _env_overrides(_read_toml(path, required=bool(explicit)))

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

# === FILE: indexnow_push/config.py ===
"""
Loading and validation of the push configuration.

Pydantic describes the schema; settings may come from a YAML/JSON file, from
command-line flags, or both (flags win).
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import urlsplit

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from indexnow_push import __version__
from indexnow_push.errors import ConfigError
from indexnow_push.providers import select_providers

_HTTP_URL = TypeAdapter(HttpUrl)


class PushConfig(BaseModel):
    """Settings for one push run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1, description="IndexNow key published as <key>.txt.")
    sitemap_url: str = Field(..., description="Root sitemap or sitemap index.")
    timeout: float = Field(30.0, gt=0, description="Total timeout of one HTTP request (seconds).")
    user_agent: str = Field(
        f"indexnow-push/{__version__}", min_length=1, description="User-Agent header."
    )
    providers: Tuple[str, ...] = Field(
        default_factory=tuple, description="Provider names to notify; empty means all."
    )
    dry_run: bool = Field(False, description="Verify and aggregate only, submit nothing.")

    @field_validator("key", mode="before")
    def _strip_key(cls, v: Any) -> Any:
        # YAML reads an all-digit key as an int
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            if any(ch.isspace() for ch in v):
                raise ValueError("key must not contain whitespace")
        return v

    @field_validator("sitemap_url", mode="before")
    def _strip_sitemap_url(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("sitemap_url")
    def _check_sitemap_url(cls, v: str) -> str:
        # Validated as an http(s) URL but kept verbatim: HttpUrl would turn
        # IDN hosts into punycode.
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise ValueError(f"not a valid http(s) URL: {reason}") from exc
        return v

    @field_validator("providers")
    def _known_providers(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        try:
            select_providers(v)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc
        return v

    @property
    def host(self) -> str:
        """``host[:port]`` of the sitemap URL as written, sent in the submission body."""
        return urlsplit(self.sitemap_url).netloc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML or JSON config file into a plain mapping (not validated yet)."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise ConfigError(f"Config file not found: {path_obj}")

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ConfigError(f"Unsupported config format: {suffix}")


def _describe(exc: ValidationError) -> str:
    """One ``field: message`` clause per validation error."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "config"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def build_config(base: Optional[Dict[str, Any]] = None, **overrides: Any) -> PushConfig:
    """
    Merge *overrides* over *base* and validate the result.

    Overrides equal to ``None`` are ignored so unset CLI flags don't clobber
    file values. Validation failures are raised as :class:`ConfigError`.
    """
    data = dict(base or {})
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return PushConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {_describe(exc)}") from exc


def load_config(path: Union[str, Path], **overrides: Any) -> PushConfig:
    """Read *path* and return a validated :class:`PushConfig`."""
    return build_config(load_config_file(path), **overrides)

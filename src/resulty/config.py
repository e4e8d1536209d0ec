"""Configuration: resolve once, freeze, then flow.

- ``Settings`` is the pydantic schema wall (fields, defaults, validation).
- ``FrozenConfig`` is the immutable payload read by the rest of the library.
- ``config_scope`` sets an ambient config for the current context only.

Precedence is defaults < environment (``RESULTY_*``, plus ``.env`` when
``resolve_config`` or ``config_scope`` is called) < explicit overrides.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from resulty.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "RESULTY_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class Settings(BaseModel):
    """Schema and defaults for every configuration field."""

    #: Attach tracebacks to the DEBUG records emitted for captured failures.
    log_captures: bool = Field(default=False)
    #: Require failure records to carry an exception instance.
    strict_options: bool = Field(default=True)

    model_config = {"extra": "forbid"}

    @field_validator("log_captures", "strict_options", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        """Accept the usual environment spellings of a boolean."""
        if isinstance(v, str):
            s = v.strip().lower()
            if s in _TRUE:
                return True
            if s in _FALSE:
                return False
            raise ValueError(f"expected a boolean flag, got {v!r}")
        return v


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration consumed by ``Result`` and the stream adapter."""

    log_captures: bool = False
    strict_options: bool = True


_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "resulty_config", default=None
)
_DOTENV_LOADED = False


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once; later calls are no-ops."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True

    from dotenv import load_dotenv

    load_dotenv()


def _env_layer() -> dict[str, str]:
    layer: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            layer[name] = raw
    return layer


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from defaults, environment and overrides.

    This is the only place a ``.env`` file is read.

    Args:
        overrides: Explicit field values; they win over the environment.

    Returns:
        A validated ``FrozenConfig``.

    Raises:
        ConfigurationError: When a value is invalid or a key is unknown.
    """
    _try_load_dotenv()
    return _resolve(overrides)


def _resolve(overrides: Mapping[str, Any] | None) -> FrozenConfig:
    merged: dict[str, Any] = {**_env_layer(), **(overrides or {})}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Invalid configuration for {field!r}: {first.get('msg')}",
            hint=f"Known fields: {', '.join(sorted(Settings.model_fields))}. "
            f"Environment variables use the {ENV_PREFIX} prefix.",
        ) from e
    cfg = FrozenConfig(**settings.model_dump())
    log.debug("Resolved config: %s", cfg)
    return cfg


@cache
def _environment_config() -> FrozenConfig:
    try:
        return _resolve(None)
    except ConfigurationError as e:
        log.warning("Ignoring invalid %s* environment: %s", ENV_PREFIX, e)
        return FrozenConfig()


def current_config() -> FrozenConfig:
    """Return the ambient config, or the one read from ``RESULTY_*`` variables.

    Never raises and never reads ``.env``: capture points call this, so an
    invalid environment falls back to defaults with a single warning. Use
    ``resolve_config`` to surface configuration errors.
    """
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else _environment_config()


def reset_environment_config() -> None:
    """Forget the cached environment config so the next lookup re-reads it."""
    _environment_config.cache_clear()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: Any,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    Scopes are context-local, so concurrent tasks do not see each other's
    overrides.

    Example:
        with config_scope(strict_options=False):
            result = Result.from_option({"kind": "failure", "value": "boom"})
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        if overrides:
            raise ConfigurationError(
                "Cannot combine a FrozenConfig with keyword overrides",
                hint="Pass either a FrozenConfig or overrides, not both.",
            )
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)

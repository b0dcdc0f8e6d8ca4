"""Telemetry services built directly on telelog.

The rest of the package only touches this narrow surface:

``configure(...)`` -- rebuild the telelog configuration from the environment
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager marrying profiling + component tracking

Console output is off unless ``REGEX_PLAYGROUND_CONSOLE`` asks for it, and
always off while the Textual host owns the terminal.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "REGEX_PLAYGROUND_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "regex_playground")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _build_config(*, tui: bool) -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = _env_flag("CONSOLE") and not tui
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))

    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))

    return config


def configure(*, config: Optional[Any] = None, tui: bool = False) -> None:
    """Adopt ``config`` or rebuild one from ``REGEX_PLAYGROUND_*`` variables.

    ``tui=True`` drops the console sink so log lines cannot garble the
    Textual screen; a ``LOG_FILE`` sink is still honored.
    """

    global _ACTIVE_CONFIG
    if config is not None and tui:
        raise ValueError("Provide either `config` or `tui`, not both.")

    _ACTIVE_CONFIG = config if config is not None else _build_config(tui=tui)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` configured for the playground."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_config(tui=False)
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(
    logger: Any, level: Any, *, expect_data: bool = False
) -> Tuple[Any, bool]:
    name = str(level).lower()
    if expect_data:
        with_attr = getattr(logger, f"{name}_with", None)
        if with_attr is not None:
            return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _resolve_level_method(logger, level, expect_data=True)
    if accepts_data:
        method(message, [(str(key), _stringify(val)) for key, val in payload.items()])
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for metadata updates inside the block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra or {})
        return payload

    def note(self, message: str) -> None:
        _emit(self.logger, "debug", f"span::{message}", self._payload())

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a code block and (optionally) track it as a component.

    ``component=True`` reuses ``name`` as the component identifier; a string
    names the component explicitly. ``metadata`` is pushed as transient
    logger context for the duration of the block. An exception escaping the
    block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, span_name=name, component_name=component_name)

    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
        log.add_context(key, handle.metadata[key])
    context_keys = list(handle.metadata)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]

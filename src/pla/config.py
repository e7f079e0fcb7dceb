from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, asdict
from typing import Any
import os


@dataclass
class Settings:
    """Training defaults with environment overlay.

    ``max_iterations`` of ``None`` keeps the training loop unbounded: on data that is not
    linearly separable it never returns.
    """

    max_iterations: int | None = None
    log_every: int = 0  # INFO progress record every N updates; 0 disables


_global_settings = Settings()
_stack: list[Settings] = []


def _env_int(name: str, default: int | None, *, allow_none: bool) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if allow_none and raw.lower() in {"", "none"}:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _from_env(s: Settings) -> Settings:
    return Settings(
        max_iterations=_env_int("PLA_MAX_ITERATIONS", s.max_iterations, allow_none=True),
        log_every=_env_int("PLA_LOG_EVERY", s.log_every, allow_none=False) or 0,
    )


def configure(**kwargs: Any) -> None:
    """Configure global training defaults.

    Example:
        configure(max_iterations=10_000)
    """
    global _global_settings
    for k, v in kwargs.items():
        if not hasattr(_global_settings, k):
            raise AttributeError(f"Unknown setting: {k}")
        _validate(k, v)
        setattr(_global_settings, k, v)


def _validate(name: str, value: Any) -> None:
    if name == "max_iterations" and value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@contextmanager
def config(**kwargs: Any):
    """Temporarily apply settings within a context."""
    global _global_settings
    _stack.append(Settings(**asdict(_global_settings)))
    try:
        configure(**kwargs)
        yield
    finally:
        prev = _stack.pop()
        _global_settings = prev


def settings() -> Settings:
    """Return the effective merged settings (env overlaid on current)."""
    return _from_env(_global_settings)

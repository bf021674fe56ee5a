"""Request-scoped logging helpers."""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from typing import Optional

logger = logging.getLogger(__name__)

_run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def bind_run_id(value: Optional[str]) -> Token | None:
    """Bind ``value`` as the run_id for the current context and return the reset token."""

    if value is None:
        return None
    return _run_id_ctx.set(value)


def reset_run_id(token: Optional[Token]) -> None:
    if token is None:
        return
    _run_id_ctx.reset(token)


def current_run_id() -> Optional[str]:
    return _run_id_ctx.get()


def truncate_input(raw: Optional[str], limit: int = 64) -> str:
    """Shorten user input before it is written to a log line."""

    if raw is None:
        return "<missing>"
    if len(raw) <= limit:
        return raw
    return f"{raw[:limit]}..."


def log_event(message: str, **extra: object) -> None:
    """Log an event with the active run_id attached."""

    payload = {"run_id": current_run_id(), **extra}
    logger.info(message, extra={"payload": payload})

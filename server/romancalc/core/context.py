from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

# One id per CLI evaluation or HTTP request; surfaced in logs and error payloads.
_correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def bind_correlation_id(correlation_id: Optional[str] = None) -> Token:
    return _correlation_id_var.set(correlation_id or new_correlation_id())


def current_correlation_id() -> Optional[str]:
    return _correlation_id_var.get()


def unbind_correlation_id(token: Token) -> None:
    _correlation_id_var.reset(token)


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    token = bind_correlation_id(correlation_id)
    try:
        yield _correlation_id_var.get() or ""
    finally:
        unbind_correlation_id(token)

from __future__ import annotations

import httpx

from algo_solver.config import Settings


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Shared outbound client used for both LeetCode and Gemini calls.

    Connection setup is bounded by `connect_timeout`; reads, writes and pool
    waits by `read_timeout`.
    """
    timeout = httpx.Timeout(settings.read_timeout, connect=settings.connect_timeout)
    return httpx.AsyncClient(timeout=timeout)


def describe_error(exc: Exception) -> str:
    """Readable message for exceptions whose str() may be empty (timeouts)."""
    return str(exc) or exc.__class__.__name__

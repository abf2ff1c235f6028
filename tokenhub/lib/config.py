"""Configuration helpers for the TokenHub UI."""

from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

LOGGER = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0


def _sanitize(value: object | None) -> str | None:
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned:
            return cleaned.rstrip("/") or cleaned
    return None


def api_base_url() -> str:
    """
    Return the backend base URL.
    Priority: session_state["api.base_url"] > TOKENHUB_API_BASE_URL > default.
    """

    try:
        session_base = st.session_state.get("api.base_url")  # type: ignore[attr-defined]
    except Exception:  # pragma: no cover - streamlit not initialised
        session_base = None
    for candidate in (session_base, os.getenv("TOKENHUB_API_BASE_URL")):
        cleaned = _sanitize(candidate)
        if cleaned:
            return cleaned
    return DEFAULT_API_BASE_URL


def request_timeout() -> float:
    raw = os.getenv("TOKENHUB_API_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Invalid TOKENHUB_API_TIMEOUT=%s, using default %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        LOGGER.warning("Invalid TOKENHUB_API_TIMEOUT=%s, using default %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def log_level() -> str:
    return (os.getenv("TOKENHUB_LOG_LEVEL") or "INFO").strip().upper()


def log_path() -> str | None:
    return _sanitize(os.getenv("TOKENHUB_LOG_PATH"))

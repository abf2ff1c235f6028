from __future__ import annotations

"""Render dispatch for routed pages."""

import inspect
from typing import Any, Callable, Dict, List, Tuple

import streamlit as st

from tokenhub.lib.api_client import ApiClient, get_client
from tokenhub.router import navigate


def _resolve_api(session_state: Any) -> ApiClient:
    """Prefer a client cached in session state before falling back to the shared one."""

    candidate = session_state.get("api") if hasattr(session_state, "get") else None
    if isinstance(candidate, ApiClient):
        return candidate
    return get_client()


def _build_injected_args(
    fn: Callable[..., Any],
    api: ApiClient,
    nav: Callable[[str], None],
) -> Tuple[List[Any], Dict[str, Any]]:
    """Map ``fn``'s parameters onto the page dependencies it asks for by name."""

    signature = inspect.signature(fn)
    args: List[Any] = []
    kwargs: Dict[str, Any] = {}

    for name, param in signature.parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue

        if name == "api":
            injected: Any = api
        elif name == "navigate":
            injected = nav
        elif param.default is not inspect.Parameter.empty:
            continue
        else:
            raise TypeError(f"Cannot inject parameter {name!r} for {fn.__qualname__}")

        if param.kind is inspect.Parameter.POSITIONAL_ONLY:
            args.append(injected)
        else:
            kwargs[name] = injected

    return args, kwargs


def dispatch_render(fn: Callable[..., Any]) -> Any:
    """Invoke a page render function with the dependencies it declares."""

    api = _resolve_api(st.session_state)
    args, kwargs = _build_injected_args(fn, api, navigate)
    return fn(*args, **kwargs)


__all__ = ["dispatch_render"]

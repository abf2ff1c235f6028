"""Route registry and navigation helpers for the TokenHub shell."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Callable, Dict, List, Mapping, Optional

import streamlit as st

LOGGER = logging.getLogger(__name__)

ROOT_PATH = "/"
QUERY_KEY = "page"
STATE_KEY = "nav.path"
# Session keys under this prefix belong to the page being left and are dropped on navigation.
LOOKUP_STATE_PREFIX = "lookup."


@dataclass(frozen=True)
class Route:
    """A client-side path mapped to the page module that renders it."""

    path: str
    label: str
    import_path: str

    @property
    def slug(self) -> str:
        return path_to_slug(self.path)

    def resolve(self) -> Callable[..., Any]:
        module = import_module(self.import_path)
        return getattr(module, "render")


# Ordered registry; the root route is the landing page.
ROUTES: Dict[str, Route] = {}


def register_route(path: str, label: str, import_path: str) -> Route:
    route = Route(path=path, label=label, import_path=import_path)
    ROUTES[path] = route
    return route


register_route(ROOT_PATH, "Home", "tokenhub.pages.home")
register_route("/erc20-balance", "ERC20 Balance", "tokenhub.pages.erc20_balance")
register_route("/nft-balance", "NFT (ERC721) Balance", "tokenhub.pages.nft_balance")
register_route("/erc1155-balance", "ERC1155 Balance", "tokenhub.pages.erc1155_balance")


def all_paths() -> List[str]:
    return list(ROUTES.keys())


def path_to_slug(path: str) -> str:
    """``/erc20-balance`` -> ``erc20-balance``; the root maps to an empty slug."""

    return path.strip().strip("/")


def slug_to_path(slug: str) -> str:
    return "/" + slug.strip().strip("/")


def match(path: Optional[str]) -> Optional[Route]:
    """Return the route registered for ``path`` or ``None`` when nothing matches."""

    if path is None:
        return None
    return ROUTES.get(path)


def path_from_query_params(qp: Mapping[str, Any]) -> Optional[str]:
    """Translate the ``page`` query parameter into a path, if one was given."""

    raw = qp.get(QUERY_KEY, None)
    if raw is None or (isinstance(raw, list) and not raw):
        return None
    if isinstance(raw, list):
        raw = raw[0]
    return slug_to_path(str(raw))


def current_path() -> str:
    """Resolve the active path: query string, then session state, then root."""

    try:
        params = dict(st.query_params)
    except Exception:  # pragma: no cover - streamlit not initialised
        params = {}
    requested = path_from_query_params(params)
    if requested is not None:
        return requested
    stored = st.session_state.get(STATE_KEY)
    if isinstance(stored, str) and stored:
        return stored
    return ROOT_PATH


def navigate(path: str) -> None:
    """Switch the rendered route to ``path``.

    Meant to run as a widget callback; Streamlit reruns the script afterwards.
    """

    LOGGER.info("navigate to %s", path)
    for key in [k for k in st.session_state.keys() if str(k).startswith(LOOKUP_STATE_PREFIX)]:
        del st.session_state[key]
    st.session_state[STATE_KEY] = path
    slug = path_to_slug(path)
    if slug:
        st.query_params[QUERY_KEY] = slug
    elif QUERY_KEY in st.query_params:
        del st.query_params[QUERY_KEY]


__all__ = [
    "ROUTES",
    "LOOKUP_STATE_PREFIX",
    "ROOT_PATH",
    "Route",
    "all_paths",
    "current_path",
    "match",
    "navigate",
    "path_from_query_params",
    "path_to_slug",
    "register_route",
    "slug_to_path",
]

from __future__ import annotations

# Must be first so absolute `tokenhub.*` imports work regardless of launch dir.
try:
    from tokenhub._bootstrap import ROOT  # noqa: F401
except ImportError:  # pragma: no cover - launched from inside the package dir
    import sys
    from pathlib import Path

    _ROOT = Path(__file__).resolve().parents[1]
    _s = str(_ROOT)
    if _s not in sys.path:
        sys.path.insert(0, _s)

import logging

import streamlit as st

from tokenhub.lib.logs import configure_logging
from tokenhub.lib.nav import dispatch_render
from tokenhub.router import STATE_KEY, current_path, match

LOGGER = logging.getLogger("tokenhub.shell")


def main() -> None:
    configure_logging()
    st.set_page_config(
        page_title="TokenHub",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.markdown(
        """
    <style>
      /* Hide Streamlit's auto-generated sidebar page nav */
      section[data-testid="stSidebarNav"] { display: none !important; }
    </style>
    """,
        unsafe_allow_html=True,
    )

    path = current_path()
    st.session_state[STATE_KEY] = path
    route = match(path)
    if route is None:
        LOGGER.warning("no route matches %s", path)
        return

    dispatch_render(route.resolve())


if __name__ == "__main__":
    main()

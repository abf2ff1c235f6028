"""Reusable card components."""

from __future__ import annotations

from typing import Callable

import streamlit as st


def nav_card(
    title: str,
    destination: str,
    on_navigate: Callable[[str], None],
    *,
    icon: str = "",
    accent: str = "#007bff",
) -> None:
    """Render a clickable card that navigates to ``destination``."""
    with st.container(border=True):
        st.markdown(
            "<div style='text-align:center;padding:8px 0;'>"
            f"<div style='font-size:2rem;color:{accent};'>{icon}</div>"
            f"<div style='font-size:1.1rem;font-weight:600;margin-top:12px;'>{title}</div>"
            "</div>",
            unsafe_allow_html=True,
        )
        st.button(
            "Check Now!",
            key=f"card.{destination.strip('/')}",
            type="primary",
            width="stretch",
            on_click=on_navigate,
            args=(destination,),
        )


def balance_card(title: str, value: str) -> None:
    """Render a KPI style card for a lookup result."""
    st.markdown(
        f"<div style='border-radius:12px;border:1px solid #dee2e6;padding:16px;'>"
        f"<div style='font-size:0.8rem;color:#6c757d;text-transform:uppercase;'>{title}</div>"
        f"<div style='font-size:1.6rem;font-weight:600;word-break:break-all;'>{value}</div>"
        "</div>",
        unsafe_allow_html=True,
    )

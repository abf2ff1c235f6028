"""Shared building blocks for the balance-check pages."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

import requests
import streamlit as st

from tokenhub.components.cards import balance_card
from tokenhub.components.tables import render_table
from tokenhub.lib.api_client import describe_error
from tokenhub.router import LOOKUP_STATE_PREFIX, ROOT_PATH
from tokenhub.state import NFTBalance

LOGGER = logging.getLogger(__name__)


def back_button(prefix: str, navigate: Callable[[str], None]) -> None:
    st.button("← Back to Home", key=f"{prefix}.back", on_click=navigate, args=(ROOT_PATH,))


def address_inputs(prefix: str) -> Optional[Tuple[str, str]]:
    """Render the wallet/contract inputs; return both values once submitted and filled."""

    wallet = st.text_input("Wallet Address", key=f"{prefix}.wallet", placeholder="0x…")
    contract = st.text_input("Contract Address", key=f"{prefix}.contract", placeholder="0x…")
    if not st.button("Check Balance", key=f"{prefix}.submit", type="primary"):
        return None

    wallet, contract = (wallet or "").strip(), (contract or "").strip()
    missing = [
        label
        for label, value in (("Wallet address", wallet), ("Contract address", contract))
        if not value
    ]
    if missing:
        st.warning(f"{' and '.join(missing)} required.")
        return None
    return wallet, contract


def run_lookup(
    prefix: str,
    lookup: Callable[[str, str], Any],
    addresses: Optional[Tuple[str, str]],
) -> Any:
    """Call ``lookup`` for submitted addresses and return the last stored result.

    Results and errors are kept in session state so they survive unrelated reruns;
    navigating away drops them.
    """

    result_key = f"{LOOKUP_STATE_PREFIX}{prefix}.result"
    error_key = f"{LOOKUP_STATE_PREFIX}{prefix}.error"
    if addresses is not None:
        wallet, contract = addresses
        try:
            with st.spinner("Fetching balance…"):
                st.session_state[result_key] = lookup(wallet, contract)
            st.session_state.pop(error_key, None)
        except requests.RequestException as exc:
            st.session_state[error_key] = describe_error(exc)
            st.session_state.pop(result_key, None)
        except ValueError as exc:
            LOGGER.warning("unexpected %s payload: %s", prefix, exc)
            st.session_state[error_key] = f"Unexpected response from backend: {exc}"
            st.session_state.pop(result_key, None)

    error = st.session_state.get(error_key)
    if error:
        st.error(error)
        return None
    return st.session_state.get(result_key)


def render_nft_result(prefix: str, result: NFTBalance) -> None:
    cols = st.columns(3)
    with cols[0]:
        balance_card("Token Name", result.token_name)
    with cols[1]:
        balance_card("Symbol", result.token_symbol)
    with cols[2]:
        balance_card("Total Tokens", result.total_tokens)
    st.caption(f"Contract: {result.address}")
    st.subheader("Owned Tokens")
    render_table(f"{prefix}.items", result.item_rows())

"""ERC20 token balance check page."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from tokenhub.components.cards import balance_card
from tokenhub.lib.api_client import ApiClient
from tokenhub.lib.balance import address_inputs, back_button, run_lookup
from tokenhub.state import ERC20Balance

PREFIX = "erc20"


def _render_result(result: ERC20Balance) -> None:
    cols = st.columns(3)
    with cols[0]:
        balance_card("Token Name", result.token_name)
    with cols[1]:
        balance_card("Symbol", result.token_symbol)
    with cols[2]:
        balance_card("Balance", f"{result.balance} {result.token_symbol}")
    st.caption(f"Contract: {result.address}")


def render(api: ApiClient, navigate: Callable[[str], None]) -> None:
    back_button(PREFIX, navigate)
    st.title("Token (ERC20) Balance")
    st.caption("Look up the fungible token balance a wallet holds for an ERC20 contract.")

    addresses = address_inputs(PREFIX)
    result = run_lookup(PREFIX, api.erc20_balance, addresses)
    if result is not None:
        _render_result(result)

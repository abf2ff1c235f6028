"""ERC1155 multi-token balance check page."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from tokenhub.lib.api_client import ApiClient
from tokenhub.lib.balance import address_inputs, back_button, render_nft_result, run_lookup

PREFIX = "erc1155"


def render(api: ApiClient, navigate: Callable[[str], None]) -> None:
    back_button(PREFIX, navigate)
    st.title("ERC1155 Balance")
    st.caption("Show per-token amounts a wallet holds in an ERC1155 contract.")

    addresses = address_inputs(PREFIX)
    result = run_lookup(PREFIX, api.erc1155_balance, addresses)
    if result is not None:
        render_nft_result(PREFIX, result)

"""NFT (ERC721) balance check page."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from tokenhub.lib.api_client import ApiClient
from tokenhub.lib.balance import address_inputs, back_button, render_nft_result, run_lookup

PREFIX = "erc721"


def render(api: ApiClient, navigate: Callable[[str], None]) -> None:
    back_button(PREFIX, navigate)
    st.title("NFT (ERC721) Balance")
    st.caption("List the ERC721 tokens a wallet owns in a collection.")

    addresses = address_inputs(PREFIX)
    result = run_lookup(PREFIX, api.erc721_balance, addresses)
    if result is not None:
        render_nft_result(PREFIX, result)

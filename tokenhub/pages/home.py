"""Landing page with the balance-check navigation cards."""

from __future__ import annotations

from typing import Callable, List, NamedTuple

import streamlit as st

from tokenhub.components.cards import nav_card


class BalanceCard(NamedTuple):
    title: str
    destination: str
    icon: str
    accent: str


BALANCE_CARDS: List[BalanceCard] = [
    BalanceCard("NFT (ERC721)", "/nft-balance", "🖼️", "#007bff"),
    BalanceCard("Token (ERC20)", "/erc20-balance", "💲", "#28a745"),
    BalanceCard("ERC1155", "/erc1155-balance", "🧱", "#ff7f50"),
]


def render(navigate: Callable[[str], None]) -> None:
    st.header("Welcome to TokenHub")
    st.subheader("Balance Check")

    cols = st.columns(len(BALANCE_CARDS))
    for col, card in zip(cols, BALANCE_CARDS):
        with col:
            nav_card(
                card.title,
                card.destination,
                navigate,
                icon=card.icon,
                accent=card.accent,
            )

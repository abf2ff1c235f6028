"""Response models for the TokenHub backend balance endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _BackendModel(BaseModel):
    """Accept camelCase payload keys while exposing snake_case attributes."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ERC20Balance(_BackendModel):
    token_name: str = Field(alias="tokenName")
    token_symbol: str = Field(alias="tokenSymbol")
    address: str
    balance: str


class NFTItem(_BackendModel):
    token_id: str = Field(alias="tokenId")
    token_uri: Optional[str] = Field(default=None, alias="tokenURI")
    amount: Optional[str] = None


class NFTBalance(_BackendModel):
    """Shared payload for ERC721 and ERC1155 lookups."""

    token_name: str = Field(alias="tokenName")
    token_symbol: str = Field(alias="tokenSymbol")
    address: str
    total_tokens: str = Field(alias="totalTokens")
    nft_items: List[NFTItem] = Field(default_factory=list, alias="nftItems")

    @field_validator("nft_items", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    def item_rows(self) -> List[dict]:
        rows = []
        for item in self.nft_items:
            row = {"Token ID": item.token_id}
            if item.token_uri:
                row["Token URI"] = item.token_uri
            if item.amount is not None:
                row["Amount"] = item.amount
            rows.append(row)
        return rows

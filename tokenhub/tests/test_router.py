"""Tests for the route registry."""

from __future__ import annotations

import pytest

from tokenhub import router


def test_registry_holds_the_four_paths_in_order() -> None:
    assert router.all_paths() == ["/", "/erc20-balance", "/nft-balance", "/erc1155-balance"]


@pytest.mark.parametrize(
    "path, module",
    [
        ("/", "tokenhub.pages.home"),
        ("/erc20-balance", "tokenhub.pages.erc20_balance"),
        ("/nft-balance", "tokenhub.pages.nft_balance"),
        ("/erc1155-balance", "tokenhub.pages.erc1155_balance"),
    ],
)
def test_match_registered_paths(path: str, module: str) -> None:
    route = router.match(path)
    assert route is not None
    assert route.path == path
    assert route.import_path == module
    assert callable(route.resolve())


@pytest.mark.parametrize("path", ["/erc721-balance", "/deploy", "", None, "erc20-balance"])
def test_unregistered_paths_do_not_match(path) -> None:
    assert router.match(path) is None


def test_query_params_translate_to_paths() -> None:
    assert router.path_from_query_params({}) is None
    assert router.path_from_query_params({"page": []}) is None
    assert router.path_from_query_params({"page": "nft-balance"}) == "/nft-balance"
    assert router.path_from_query_params({"page": ["erc1155-balance"]}) == "/erc1155-balance"
    assert router.path_from_query_params({"page": ""}) == "/"


def test_route_slugs() -> None:
    assert router.ROUTES["/"].slug == ""
    assert router.ROUTES["/erc20-balance"].slug == "erc20-balance"
    assert router.slug_to_path(router.path_to_slug("/nft-balance")) == "/nft-balance"

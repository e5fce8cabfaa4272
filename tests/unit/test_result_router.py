"""Result router: category to admin path."""

import pytest

from storefront_admin.application.services.result_router import ResultRouter
from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory
from storefront_admin.domain.exceptions import ValidationException


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        (SearchCategory.CATALOG_ITEM, "/admin/products/p1"),
        (SearchCategory.ORDER, "/admin/orders"),
        (SearchCategory.ACCOUNT, "/admin/users"),
    ],
)
def test_route_by_category(category: SearchCategory, expected: str) -> None:
    target = ResultRouter().route(category, "p1")
    assert target.category == category
    assert target.path == expected


def test_route_accepts_category_value_strings() -> None:
    target = ResultRouter().route("catalog_item", "abc")
    assert target.category is SearchCategory.CATALOG_ITEM
    assert target.path == "/admin/products/abc"


def test_route_unknown_category_raises() -> None:
    with pytest.raises(ValidationException) as exc_info:
        ResultRouter().route("coupon", "c1")
    assert exc_info.value.details == {"field": "category"}


def test_custom_base_path_trailing_slash_is_ignored() -> None:
    target = ResultRouter(base_path="/backoffice/").route(SearchCategory.ORDER, "o1")
    assert target.path == "/backoffice/orders"


def test_route_entry_uses_entry_category_and_id() -> None:
    entry = SearchEntry(
        category=SearchCategory.ACCOUNT,
        id="u9",
        title="a@x.com",
        search_text="a@x.com",
    )
    assert ResultRouter().route_entry(entry).path == "/admin/users"

import pytest
from naturals.catalog.errors import CatalogError
from naturals.catalog.ordering import (
    by_ingredient_count,
    by_name,
    is_sorted,
    parse_sort_key,
    sort_key_fn,
    sort_products,
)
from naturals.catalog.types import Product, SortKey


def make(name: str, n: int) -> Product:
    return Product.new(name, [f"ingredient-{i}" for i in range(n)])


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("name", SortKey.NAME),
        ("NAME", SortKey.NAME),
        ("  ingredients ", SortKey.INGREDIENTS),
        ("ingredient-count", SortKey.INGREDIENTS),
        ("ingredient_count", SortKey.INGREDIENTS),
        ("count", SortKey.INGREDIENTS),
        (SortKey.NAME, SortKey.NAME),
    ],
)
def test_parse_sort_key(raw, expected):
    assert parse_sort_key(raw) is expected


def test_parse_sort_key_unknown_raises_catalog_error():
    with pytest.raises(CatalogError) as ei:
        parse_sort_key("price")

    assert ei.value.code == "unknown_sort_key"
    assert "price" in str(ei.value)
    assert ei.value.details == {"supported": ["name", "ingredients"]}


def test_sort_key_fn_maps_policies():
    assert sort_key_fn(SortKey.NAME) is by_name
    assert sort_key_fn("ingredients") is by_ingredient_count


def test_ingredient_count_ignores_ingredient_content():
    a = Product.new("a", ["Zinc"])
    b = Product.new("b", ["Aloe"])
    assert by_ingredient_count(a) == by_ingredient_count(b) == 1


def test_sort_products_returns_new_list():
    items = [make("b", 3), make("a", 1), make("c", 2)]
    out = sort_products(items, SortKey.INGREDIENTS)

    assert [p.name for p in out] == ["a", "c", "b"]
    assert [p.name for p in items] == ["b", "a", "c"]


def test_sort_products_stable_on_equal_counts():
    items = [make("z", 2), make("y", 2), make("x", 1), make("w", 2)]
    out = sort_products(items, SortKey.INGREDIENTS)
    assert [p.name for p in out] == ["x", "z", "y", "w"]


def test_sort_products_uses_codepoint_order():
    items = [make("b", 0), make("B", 0), make("a", 0), make("Ä", 0)]
    out = sort_products(items, SortKey.NAME)
    assert [p.name for p in out] == ["B", "a", "b", "Ä"]


def test_is_sorted():
    items = [make("a", 3), make("b", 1)]
    assert is_sorted(items, SortKey.NAME)
    assert not is_sorted(items, SortKey.INGREDIENTS)
    assert is_sorted(sort_products(items, SortKey.INGREDIENTS), SortKey.INGREDIENTS)


def test_is_sorted_trivial_sequences():
    assert is_sorted([], SortKey.NAME)
    assert is_sorted([make("only", 1)], SortKey.INGREDIENTS)


def test_sort_key_label():
    assert SortKey.NAME.label == "name"
    assert SortKey.INGREDIENTS.label == "ingredient count"

# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Naturals Contributors
#
# This file is part of Naturals.
#
# Naturals is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Naturals is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from naturals.catalog.errors import CatalogError
from naturals.catalog.types import Product, SortKey

KeyFn = Callable[[Product], Any]

# Key functions (one per ordering policy)


def by_name(p: Product) -> str:
    return p.name


def by_ingredient_count(p: Product) -> int:
    return len(p.ingredients)


_KEY_FNS: dict[SortKey, KeyFn] = {
    SortKey.NAME: by_name,
    SortKey.INGREDIENTS: by_ingredient_count,
}

_ALIASES: dict[str, SortKey] = {
    "name": SortKey.NAME,
    "ingredients": SortKey.INGREDIENTS,
    "ingredient-count": SortKey.INGREDIENTS,
    "ingredient_count": SortKey.INGREDIENTS,
    "count": SortKey.INGREDIENTS,
}


def parse_sort_key(value: SortKey | str) -> SortKey:
    """
    Resolve a sort key from its enum member or string form (case-insensitive).

    Raises:
        CatalogError if the value names no known ordering.
    """
    if isinstance(value, SortKey):
        return value
    key = _ALIASES.get(value.strip().lower())
    if key is None:
        raise CatalogError(
            code="unknown_sort_key",
            message=f"Unknown sort key: {value!r}",
            details={"supported": [k.value for k in SortKey]},
        )
    return key


def sort_key_fn(key: SortKey | str) -> KeyFn:
    return _KEY_FNS[parse_sort_key(key)]


def sort_products(products: Iterable[Product], key: SortKey | str) -> list[Product]:
    """
    Return a new list ordered ascending by `key`.

    Python's sort is stable: products equal under the key keep their
    relative order.
    """
    return sorted(products, key=sort_key_fn(key))


def is_sorted(products: Sequence[Product], key: SortKey | str) -> bool:
    fn = sort_key_fn(key)
    return all(fn(a) <= fn(b) for a, b in zip(products, products[1:]))

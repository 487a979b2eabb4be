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

from collections.abc import Iterable, Iterator
from typing import Any

from naturals.catalog.ordering import by_ingredient_count, by_name, sort_key_fn
from naturals.catalog.types import Product, SortKey


class ProductCollection:
    """
    Ordered, mutable group of products.

    Insertion order is the default order. Sorting reorders the collection
    in place and is stable, so products that compare equal under the
    chosen key keep their insertion order.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = list(products)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    # Mutation

    def add(self, product: Product) -> None:
        self._products.append(product)

    def extend(self, products: Iterable[Product]) -> None:
        for p in products:
            self.add(p)

    # Ordering

    def sort_by_name(self) -> None:
        self._products.sort(key=by_name)

    def sort_by_ingredient_count(self) -> None:
        self._products.sort(key=by_ingredient_count)

    def sort(self, key: SortKey | str) -> None:
        self._products.sort(key=sort_key_fn(key))

    # Rendering

    def format(self) -> str:
        return "\n".join(p.format() for p in self._products)

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": len(self._products),
            "products": [p.to_dict() for p in self._products],
        }

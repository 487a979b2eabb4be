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

from naturals.catalog.collection import ProductCollection
from naturals.catalog.errors import CatalogError
from naturals.catalog.ordering import is_sorted, parse_sort_key, sort_key_fn, sort_products
from naturals.catalog.samples import sample_products
from naturals.catalog.types import Product, SortKey

__all__ = [
    "Product",
    "SortKey",
    "ProductCollection",
    "CatalogError",
    "parse_sort_key",
    "sort_key_fn",
    "sort_products",
    "is_sorted",
    "sample_products",
]

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

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Enums


class SortKey(str, Enum):
    """
    Ordering policy for a product collection.

    The two policies differ only in the key they compare; see
    ``naturals.catalog.ordering`` for the key functions.
    """

    NAME = "name"
    INGREDIENTS = "ingredients"

    @property
    def label(self) -> str:
        """Human-readable description used in CLI output."""
        if self == SortKey.NAME:
            return "name"
        return "ingredient count"


# Product


@dataclass(frozen=True, slots=True)
class Product:
    """
    A personal-care product: a name and its ingredients.

    No validation is applied; an empty name or an empty ingredient
    list are both valid products.
    """

    name: str
    ingredients: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # ingredients are always stored as a tuple, whatever iterable was passed
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

    @staticmethod
    def new(name: str, ingredients: Iterable[str] = ()) -> "Product":
        return Product(name=name, ingredients=tuple(ingredients))

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredients)

    def format(self) -> str:
        return f"{self.name} | Ingredients: {', '.join(self.ingredients)}"

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ingredients": list(self.ingredients),
        }

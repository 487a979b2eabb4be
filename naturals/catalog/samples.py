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

from naturals.catalog.types import Product


def sample_products() -> tuple[Product, ...]:
    """Demo catalog shown by the `naturals` command, in insertion order."""
    return (
        Product.new("Coconut and Vanilla Body Scrub", ["Coconut Oil", "Vanilla Extract"]),
        Product.new("Lavender and Rosemary Diffuser Oil", ["Lavender Oil", "Rosemary Oil"]),
    )

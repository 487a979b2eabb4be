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

from collections.abc import Mapping
from typing import Any

from naturals.catalog.collection import ProductCollection
from naturals.rendering._json import dumps_deterministic


class JsonListingRenderer:
    """
    Machine-readable output: deterministic JSON (sorted keys).

    Products keep collection order; only mapping keys are sorted.
    """

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, collection: ProductCollection) -> str:
        return dumps_deterministic(collection, indent=self.indent) + "\n"

    def render_document(self, document: Mapping[str, Any]) -> str:
        return dumps_deterministic(document, indent=self.indent) + "\n"

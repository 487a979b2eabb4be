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

from dataclasses import dataclass

from naturals.catalog.types import SortKey
from naturals.rendering.renderers.text import Verbosity


@dataclass(frozen=True)
class RunConfig:
    sort_key: SortKey = SortKey.INGREDIENTS
    output_format: str = "text"
    verbosity: Verbosity = "normal"  # text output only

# SPDX-License-Identifier: AGPL-3.0-only

from typing import Literal

from naturals.catalog.collection import ProductCollection

Verbosity = Literal["quiet", "normal", "verbose"]


def _plural(n: int, noun: str) -> str:
    return f"{n} {noun}{'' if n == 1 else 's'}"


class TextListingRenderer:
    """
    Human-readable CLI output. Pure rendering: does not sort or mutate.

    Verbosity levels:
    - quiet: one-line product count
    - normal: one line per product (ProductCollection.format)
    - verbose: numbered lines with ingredient counts
    """

    def __init__(self, verbosity: Verbosity = "normal"):
        self.verbosity = verbosity

    def render(self, collection: ProductCollection) -> str:
        if self.verbosity == "quiet":
            return self._render_quiet(collection)
        elif self.verbosity == "verbose":
            return self._render_verbose(collection)
        else:
            return self._render_normal(collection)

    def _render_quiet(self, collection: ProductCollection) -> str:
        return f"{_plural(len(collection), 'product')}\n"

    def _render_normal(self, collection: ProductCollection) -> str:
        out = collection.format()
        return f"{out}\n" if out else ""

    def _render_verbose(self, collection: ProductCollection) -> str:
        lines: list[str] = []
        for i, p in enumerate(collection, start=1):
            lines.append(f"{i:>3}. {p.format()}  ({_plural(p.ingredient_count, 'ingredient')})")
        lines.append(self._render_quiet(collection).rstrip("\n"))
        return "\n".join(lines) + "\n"

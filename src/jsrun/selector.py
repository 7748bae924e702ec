"""Selection of one catalog item.

Front ends implement ``Selector``; ``PromptSelector`` is the plain terminal
version used by the CLI.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TextIO

from .core import Catalog
from .models import CatalogSource, SelectableItem
from .summary import render_catalog

MAX_ATTEMPTS = 3
_DISMISS = {"", "q", "quit"}


@dataclass(frozen=True)
class Selection:
    source: CatalogSource
    item: SelectableItem


class Selector(Protocol):
    """Present the catalog and return the chosen item, or None when dismissed."""

    def select(self, catalog: Catalog) -> Selection | None: ...


def numbered(catalog: Catalog) -> list[Selection]:
    """Flatten the catalog in display order; index + 1 is the shown number."""
    return [Selection(source, item) for source in catalog.sources for item in source.items]


class PromptSelector:
    """Print the numbered catalog and read a number from the terminal."""

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._input = input_func
        self._output = output
        self._max_attempts = max_attempts

    def _write(self, text: str) -> None:
        print(text, file=self._output or sys.stdout)

    def select(self, catalog: Catalog) -> Selection | None:
        self._write(render_catalog(catalog))
        choices = numbered(catalog)
        if not choices:
            return None

        prompt = f"Run with {catalog.prompt_manager} [1-{len(choices)}, q to quit]: "
        for _ in range(self._max_attempts):
            try:
                answer = (self._input or input)(prompt).strip().lower()
            except (EOFError, KeyboardInterrupt):
                return None

            if answer in _DISMISS:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            self._write(f"Invalid choice: {answer!r}")

        return None

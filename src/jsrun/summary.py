"""Human-readable catalog rendering for the terminal picker."""

from __future__ import annotations

from .core import Catalog


def render_catalog(catalog: Catalog) -> str:
    """Return one numbered block per source; numbering runs across all sources."""
    if not catalog.sources:
        return f"No package.json found above {catalog.start}\n"

    lines: list[str] = []
    number = 0
    for source in catalog.sources:
        title = source.title or source.working_directory.name
        lines.append(f"{title} [{source.manager}] {source.working_directory}")

        width = max(len(item.label) for item in source.items) if source.items else 0
        for item in source.items:
            number += 1
            lines.append(f"  {number:>3}. {item.label:<{width}}  {item.description}".rstrip())
        lines.append("")

    return "\n".join(lines)

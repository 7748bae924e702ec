"""jsrun core package.

Detects the package manager of a JavaScript/TypeScript project and builds a
catalog of runnable tasks from the nearest package.json files.
"""

__all__ = [
    "core",
]

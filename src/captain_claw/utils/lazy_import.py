"""Deferred imports for optional backends."""

from collections.abc import Callable
from functools import cache
from importlib import import_module

__all__ = [
    "lazy_import",
]


def lazy_import(
    module_name: str,
    name: str | None = None,
) -> Callable[[], object]:
    """Lazily import a module or an attribute from a module.

    The import happens on first call, so a backend library is only
    required once that backend is actually used.
    """

    @cache
    def _load() -> object:
        mod = import_module(module_name)
        return getattr(mod, name) if name else mod

    return _load

"""Clone/update engine: fluent in-place mutation and shallow duplication."""

from fieldkit.cloning.core import Clonable, Updatable, clone, update

__all__ = [
    "update",
    "clone",
    "Updatable",
    "Clonable",
]

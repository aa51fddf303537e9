"""Utility helper functions."""

import importlib
import random
from typing import Any


def generate_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 2**31 - 1)


def import_object(path: str) -> Any:
    """Import an object from a ``package.module:Name`` path.

    Dotted attribute access after the colon is supported, e.g.
    ``package.module:Outer.Inner``.

    Raises:
        ValueError: If the path has no ``:`` separator
        ImportError: If the module cannot be imported
        AttributeError: If the name does not exist in the module
    """
    module_name, sep, qualname = path.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Expected 'package.module:Name', got '{path}'")

    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj

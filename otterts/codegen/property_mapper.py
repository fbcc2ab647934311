"""The property mapper hook.

A property mapper is any callable taking the raw schema-name-keyed map (the
document's `components.schemas`, or the whole input in raw-schema mode) and
returning a possibly renamed equivalent. It runs once, before transformation.
"""

import copy
import importlib
from collections.abc import Callable, Mapping
from typing import Any

from otterts.exceptions import ConfigurationError

__all__ = ['PropertyMapper', 'apply_property_mapper', 'load_property_mapper']

PropertyMapper = Callable[[dict[str, Any]], Mapping[str, Any]]


def apply_property_mapper(
    schemas: Mapping[str, Any], mapper: PropertyMapper | None = None
) -> Mapping[str, Any]:
    """Apply `mapper` to `schemas`; without a mapper this is the identity.

    The mapper receives a deep copy, so it is free to mutate its argument
    without touching the caller's document.
    """
    if mapper is None:
        return schemas
    return mapper(copy.deepcopy(dict(schemas)))


def load_property_mapper(path: str) -> PropertyMapper:
    """Import a property mapper from a `package.module:function` path."""
    module_name, sep, attribute = path.partition(':')
    if not sep or not module_name or not attribute:
        raise ConfigurationError(
            f"Invalid property mapper '{path}', expected 'module:function'",
            field='property_mapper',
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(
            f"Cannot import property mapper module '{module_name}': {e}",
            field='property_mapper',
        ) from e

    mapper = getattr(module, attribute, None)
    if not callable(mapper):
        raise ConfigurationError(
            f"Property mapper '{path}' is not callable", field='property_mapper'
        )
    return mapper

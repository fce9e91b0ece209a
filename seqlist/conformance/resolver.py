"""
Selecting the List implementation the conformance harness exercises.

The harness itself only ever receives a zero-argument factory. This module
turns a dotted class name (from the command line or the `CLASS_UNDER_TEST`
environment variable) into such a factory, checking that the class really
implements :class:`seqlist.datastructures.List`.
"""

from __future__ import annotations

import importlib
import os
from typing import Callable, Mapping, Optional, Type

from ..config import CLASS_UNDER_TEST_ENV, DEFAULT_CLASS
from ..datastructures.base import List
from ..errors import ConfigurationError

ListFactory = Callable[[], List]


def resolve_class(dotted_name: str) -> Type[List]:
    """Import and return the class named by ``package.module.ClassName``.

    Raises:
        ConfigurationError: if the name is malformed, cannot be imported,
            or does not name a concrete List subclass.
    """
    module_name, _, class_name = dotted_name.rpartition(".")
    if not module_name or not class_name:
        raise ConfigurationError(f"expected 'module.ClassName', got {dotted_name!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"cannot import module {module_name!r}: {e}") from e

    cls = getattr(module, class_name, None)
    if cls is None:
        raise ConfigurationError(f"module {module_name!r} has no attribute {class_name!r}")
    if not isinstance(cls, type) or not issubclass(cls, List):
        raise ConfigurationError(f"class {dotted_name} does not implement {List.__module__}.{List.__name__}")
    if getattr(cls, "__abstractmethods__", None):
        missing = ", ".join(sorted(cls.__abstractmethods__))
        raise ConfigurationError(f"class {dotted_name} is abstract (missing: {missing})")
    return cls


def class_under_test(env: Optional[Mapping[str, str]] = None) -> Type[List]:
    """Resolve the class named by the `CLASS_UNDER_TEST` environment variable.

    Raises:
        ConfigurationError: if the variable is unset or names a bad class.
    """
    env = os.environ if env is None else env
    name = env.get(CLASS_UNDER_TEST_ENV)
    if not name:
        raise ConfigurationError(f"Environment variable {CLASS_UNDER_TEST_ENV} undefined")
    return resolve_class(name)


def factory_for(name: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> ListFactory:
    """Return a no-argument factory for the chosen implementation.

    Precedence: explicit `name`, then `CLASS_UNDER_TEST`, then the built-in
    ArrayList.
    """
    env = os.environ if env is None else env
    name = name or env.get(CLASS_UNDER_TEST_ENV) or DEFAULT_CLASS
    cls = resolve_class(name)

    def factory() -> List:
        try:
            return cls()
        except TypeError as e:
            raise ConfigurationError(f"class {name} has no no-argument constructor: {e}") from e

    factory.__qualname__ = f"factory_for({name})"
    return factory

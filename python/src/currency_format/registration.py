"""Opt-in registration of CurrencyFormat on a host namespace.

Script-style callers that look the formatter up by name on a shared
object (a module, a ``SimpleNamespace``, a template globals dict) call
``register()`` themselves. Importing the package never touches any
global.
"""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .batch import CurrencyFormat
from .errors import RegistrationError

DEFAULT_NAME = "CurrencyFormat"

_MISSING = object()


def register(host: Any, name: str = DEFAULT_NAME, *, replace: bool = False) -> type[CurrencyFormat]:
    """Attach CurrencyFormat to ``host`` under ``name`` and return the class.

    Mapping hosts get a key, anything else an attribute. Raises
    RegistrationError if ``host`` is None, refuses the attribute, or
    already holds a different object under ``name`` and ``replace`` is
    false.
    """
    if host is None:
        raise RegistrationError("Cannot register on a None host", host)

    existing = _lookup(host, name)
    if existing is not _MISSING and existing is not CurrencyFormat and not replace:
        raise RegistrationError(
            f"Host already defines {name!r}; pass replace=True to overwrite", host
        )

    if isinstance(host, MutableMapping):
        host[name] = CurrencyFormat
        return CurrencyFormat

    try:
        setattr(host, name, CurrencyFormat)
    except (AttributeError, TypeError) as exc:
        raise RegistrationError(
            f"Cannot set {name!r} on {type(host).__name__}: {exc}", host
        ) from exc
    return CurrencyFormat


def unregister(host: Any, name: str = DEFAULT_NAME) -> bool:
    """Remove CurrencyFormat from ``host``.

    Only removes the entry if it is our class. Returns True if something
    was removed.
    """
    if host is None or _lookup(host, name) is not CurrencyFormat:
        return False
    if isinstance(host, MutableMapping):
        del host[name]
    else:
        delattr(host, name)
    return True


def _lookup(host: Any, name: str) -> Any:
    if isinstance(host, MutableMapping):
        return host.get(name, _MISSING)
    return getattr(host, name, _MISSING)

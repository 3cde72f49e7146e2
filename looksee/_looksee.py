"""Top-level queries."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from . import _config
from ._lookup_path import LookupPath
from ._runtime import PythonRuntime


def normalize_options(
    shortcuts: Iterable[str],
    options: Mapping[str, bool],
    config: Optional[_config.Config] = None,
) -> Dict[str, bool]:
    """Merge options for a query. Later sources win:

    1. The configured default options.
    2. Shortcuts, each of which sets that option to True.
    3. Explicit options.
    """
    config = _config.config if config is None else config
    normalized: Dict[str, bool] = dict(config.default_options)
    for shortcut in shortcuts:
        normalized[shortcut] = True
    normalized.update(options)
    return normalized


def lookup_path(obj: Any, *shortcuts: str, **options: bool) -> LookupPath:
    """Return the methods `obj` responds to, grouped by the module that defines
    them, in the order Python looks them up.

    Options select which methods are included:

    * `public`: include public methods.
    * `protected`: include protected methods (`_name`).
    * `private`: include private methods (`__name`).
    * `overridden`: include methods shadowed by a module earlier in the path.

    Any option can be switched on by passing its name as a positional shortcut.
    Options not given fall back to `looksee.config.default_options`, which defaults
    to public, protected, and overridden methods. For example,

    >>> looksee.lookup_path(obj, "private", overridden=False)

    shows public, protected, and private methods, hiding shadowed ones.

    The result renders itself when printed or echoed in a REPL.
    """
    return LookupPath(obj, normalize_options(shortcuts, options))


def lookup_modules(obj: Any) -> List[Any]:
    """Return the namespaces Python consults, in order, when looking up a method on
    `obj`. Singleton namespaces are returned as :class:`looksee.SingletonClass`
    handles."""
    return PythonRuntime().lookup_modules(obj)

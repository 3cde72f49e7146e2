"""Lookup paths: the modules consulted when resolving a method call on an object,
together with the methods each one defines."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from typing_extensions import Literal

from . import _columnizer
from ._config import Config, Style, _identity
from ._config import config as _default_config
from ._runtime import VISIBILITIES, PythonRuntime, Runtime

Tag = Literal["public", "protected", "private", "overridden"]

_python_runtime = PythonRuntime()


# Not frozen: raising assigns __traceback__, e.g. when leaving a context manager.
@dataclasses.dataclass
class LookupPathError(Exception):
    """Raised when no lookup path can be derived for an object."""

    message: str

    def __str__(self) -> str:
        return self.message


class LookupPath:
    """The modules an object's method lookups pass through, in resolution order.

    Each module is represented by an :class:`Entry`. Options restrict which methods
    are included:

    * `public`, `protected`, `private`: include methods with this visibility.
    * `overridden`: include methods that an earlier module in the path shadows.

    The path is computed eagerly: later changes to the object or its classes are not
    reflected.
    """

    def __init__(
        self,
        obj: Any,
        options: Optional[Mapping[str, bool]] = None,
        *,
        runtime: Optional[Runtime] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.runtime: Runtime = _python_runtime if runtime is None else runtime
        self.config = _default_config if config is None else config
        self.options: Dict[str, bool] = dict(options or {})

        node = self.runtime.class_of(obj)
        if node is None:
            raise LookupPathError(
                f"No lookup path derivable for {obj!r}: the runtime reports no class"
                " for it."
            )

        entries: List[Entry] = []
        seen: Set[str] = set()
        while node is not None:
            entry = Entry(
                self.runtime.as_module(node), seen, self.options, self.runtime
            )
            # Shadowing follows the runtime, which resolves by name whether or not a
            # method is displayed.
            seen.update(entry.defined_names)
            entries.append(entry)
            node = self.runtime.superclass_of(node)
        self.entries: Tuple[Entry, ...] = tuple(entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def render(self, width: Optional[int] = None) -> str:
        """Render the path as text: each module's name followed by its methods laid
        out in columns.

        Args:
            width: Width to lay methods out in. Defaults to the `COLUMNS` environment
                variable, then to the configured default width.
        """
        width = self.config.resolve_width(width)
        return "".join(
            entry.render(width, self.config.styles) for entry in self.entries
        )

    def __repr__(self) -> str:
        return self.render()


class Entry:
    """One module in a :class:`LookupPath`, with the methods defined directly on it.

    Iterating yields `(name, visibility)` pairs sorted by name, where the visibility
    is `"public"`, `"protected"`, `"private"`, or `"overridden"` for methods an
    earlier module in the path also defines.
    """

    def __init__(
        self,
        module: Any,
        seen: Set[str],
        options: Mapping[str, bool],
        runtime: Runtime,
    ) -> None:
        self.module = module
        self.module_name = runtime.display_label(module)
        self.defined_names: Set[str] = set()
        self._visibilities: Dict[str, Tag] = {}
        # Resolved on this module without being one of its listed methods.
        self.defined_names.update(runtime.shadowing_names(module))

        for visibility in VISIBILITIES:
            names = list(runtime.direct_methods(module, visibility))
            self.defined_names.update(names)
            if not options.get(visibility):
                continue
            for name in names:
                if name not in seen:
                    self._visibilities[name] = visibility
                elif options.get("overridden"):
                    self._visibilities[name] = "overridden"

        self.methods: List[str] = sorted(self._visibilities)

    def visibility_of(self, name: str) -> Tag:
        return self._visibilities[name]

    def __iter__(self) -> Iterator[Tuple[str, Tag]]:
        for name in self.methods:
            yield name, self._visibilities[name]

    def __len__(self) -> int:
        return len(self.methods)

    def __repr__(self) -> str:
        return f"<Entry {self.module_name} ({len(self.methods)} methods)>"

    def render(self, width: int, styles: Mapping[str, Style]) -> str:
        """Module name on its own line, followed by the columnized methods."""
        module_style = styles.get("module", _identity)
        styled_methods = [
            styles.get(visibility, _identity)(name) for name, visibility in self
        ]
        return (
            module_style(self.module_name)
            + "\n"
            + _columnizer.columnize(styled_methods, width)
        )


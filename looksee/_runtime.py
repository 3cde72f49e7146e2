"""Reflection over the live object graph.

The lookup path machinery in :mod:`looksee._lookup_path` never touches objects
directly. It asks a :class:`Runtime` for the chain of namespaces an attribute lookup
walks through, and for the names defined directly on each of them.
:class:`PythonRuntime` answers these questions for CPython objects.

Here's how a method lookup on a Python object works, roughly:

    obj.method()           ->  [obj]  (only if obj holds its own functions)
                               type(obj).__mro__[0]
                               type(obj).__mro__[1]
                               ...
                               object

    SomeClass.method()     ->  [SomeClass]  (classmethods and staticmethods)
                               [Base]
                               [object]
                               type(SomeClass).__mro__[0]  (the metaclass)
                               ...
                               object

Bracketed entries are singleton namespaces: attributes held by exactly one object.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import Any, Iterable, List, Optional, Tuple

from typing_extensions import Literal, Protocol

Visibility = Literal["public", "protected", "private"]
VISIBILITIES: Tuple[Visibility, ...] = ("public", "protected", "private")


class Runtime(Protocol):
    """Queries the lookup path machinery needs from a host runtime.

    Nodes are opaque: the core only passes them back into the runtime that produced
    them."""

    def class_of(self, obj: Any) -> Optional[Any]:
        """Most-derived node of `obj`'s lookup chain, or `None` if there isn't one."""
        ...

    def superclass_of(self, node: Any) -> Optional[Any]:
        """Next node in the chain, or `None` at the root."""
        ...

    def as_module(self, node: Any) -> Any:
        """View a chain node as a namespace of methods."""
        ...

    def direct_methods(self, module: Any, visibility: Visibility) -> Iterable[str]:
        """Names of methods defined directly on `module` with the given visibility.
        Inherited and explicitly undefined methods are excluded."""
        ...

    def shadowing_names(self, module: Any) -> Iterable[str]:
        """Names that resolve on `module` but aren't reported by `direct_methods`.
        They hide same-named methods further down the chain."""
        ...

    def display_label(self, module: Any) -> str:
        """Human-readable name for `module`."""
        ...


@dataclasses.dataclass(frozen=True, eq=False)
class SingletonClass:
    """Handle for the namespace of methods belonging to exactly one object.

    For a class, this holds its class-level methods; for any other object, the
    functions stored in its own `__dict__`. Handles can be nested, in which case
    they're labeled with one pair of brackets per level: `[C]`, `[[C]]`, ..."""

    owner: Any

    def __repr__(self) -> str:
        return f"SingletonClass({_object_label(self.owner)})"


def singleton_class(obj: Any) -> SingletonClass:
    return SingletonClass(obj)


@dataclasses.dataclass(frozen=True, eq=False)
class _ChainNode:
    # Python linearizes each object's MRO separately, so a node's successor depends
    # on the subject the chain was computed for.
    chain: Tuple[Any, ...]
    index: int

    @property
    def module(self) -> Any:
        return self.chain[self.index]


class PythonRuntime:
    """:class:`Runtime` implementation for CPython objects."""

    def lookup_modules(self, obj: Any) -> List[Any]:
        """Namespaces consulted, in order, when looking up a method on `obj`."""
        if isinstance(obj, type):
            return [SingletonClass(cls) for cls in obj.__mro__] + list(
                type(obj).__mro__
            )
        modules: List[Any] = []
        if len(_own_namespace_methods(obj)) > 0:
            modules.append(SingletonClass(obj))
        modules.extend(type(obj).__mro__)
        return modules

    def class_of(self, obj: Any) -> Optional[_ChainNode]:
        modules = tuple(self.lookup_modules(obj))
        if len(modules) == 0:
            return None
        return _ChainNode(modules, 0)

    def superclass_of(self, node: _ChainNode) -> Optional[_ChainNode]:
        if node.index + 1 >= len(node.chain):
            return None
        return _ChainNode(node.chain, node.index + 1)

    def as_module(self, node: _ChainNode) -> Any:
        return node.module

    def direct_methods(self, module: Any, visibility: Visibility) -> List[str]:
        if isinstance(module, SingletonClass):
            owner = module.owner
            if isinstance(owner, type):
                names = _class_level_methods(owner)
                mangle_prefix: Optional[str] = owner.__name__
            else:
                names = _own_namespace_methods(owner)
                mangle_prefix = None
        else:
            names = [
                name for name, value in vars(module).items() if _is_method(value)
            ]
            mangle_prefix = module.__name__
        return [
            name
            for name in names
            if visibility_from_name(name, mangle_prefix) == visibility
        ]

    def shadowing_names(self, module: Any) -> List[str]:
        # `C.method` finds the plain function in C before reaching the metaclass.
        if isinstance(module, SingletonClass) and isinstance(module.owner, type):
            return [
                name
                for name, value in vars(module.owner).items()
                if _is_method(value) and not _is_class_level_method(value)
            ]
        return []

    def display_label(self, module: Any) -> str:
        return _object_label(module)


def visibility_from_name(name: str, class_name: Optional[str] = None) -> Visibility:
    """Classify a method name using Python's naming conventions.

    `__special__` methods are part of the public protocol of an object. Names
    mangled for `class_name` (`_Class__name`) and unmangled `__name` are private,
    and any other leading underscore marks a name as protected.
    """
    if name.startswith("__") and name.endswith("__") and len(name) > 4:
        return "public"
    if class_name is not None:
        stripped = class_name.lstrip("_")
        if len(stripped) > 0 and name.startswith(f"_{stripped}__"):
            return "private"
    if name.startswith("__"):
        return "private"
    if name.startswith("_"):
        return "protected"
    return "public"


def _is_method(value: Any) -> bool:
    # Names bound to None (`__hash__ = None`) block lookup and are never methods.
    return inspect.isroutine(value) or isinstance(value, (classmethod, staticmethod))


def _is_class_level_method(value: Any) -> bool:
    return isinstance(
        value,
        (
            classmethod,
            staticmethod,
            types.ClassMethodDescriptorType,
            # Static builtins in a type's namespace, like `object.__new__`.
            types.BuiltinFunctionType,
        ),
    )


def _class_level_methods(cls: type) -> List[str]:
    return [name for name, value in vars(cls).items() if _is_class_level_method(value)]


def _own_namespace_methods(obj: Any) -> List[str]:
    try:
        namespace = vars(obj)
    except TypeError:
        # No __dict__, e.g. ints or instances of classes with __slots__.
        return []
    return [name for name, value in namespace.items() if _is_method(value)]


def _object_label(obj: Any) -> str:
    if isinstance(obj, SingletonClass):
        return f"[{_object_label(obj.owner)}]"
    if isinstance(obj, type):
        return obj.__qualname__.rpartition("<locals>.")[2]
    if isinstance(obj, types.ModuleType):
        return obj.__name__
    return f"<{_object_label(type(obj))} object at {hex(id(obj))}>"

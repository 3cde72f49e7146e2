"""Process-wide defaults: which methods to show, how wide to render, how to style."""

from __future__ import annotations

import contextlib
import dataclasses
import functools
import os
import warnings
from typing import Any, Callable, Dict, Iterator, Optional

import termcolor
from typing_extensions import TypedDict

from ._warnings import LookseeWarning

Style = Callable[[str], str]


class LookupPathOptions(TypedDict, total=False):
    """Options recognized when building a lookup path.

    Attributes:
        public: Include public methods.
        protected: Include protected methods.
        private: Include private methods.
        overridden: Include methods shadowed by an earlier module in the path.
    """

    public: bool
    protected: bool
    private: bool
    overridden: bool


def style(color: Optional[str] = None, *attrs: str) -> Style:
    """Make a style that colors text with `termcolor`.

    Example:
    >>> looksee.config.styles["public"] = looksee.style("cyan", "bold", "underline")
    """
    return functools.partial(termcolor.colored, color=color, attrs=list(attrs))


def _identity(x: str) -> str:
    return x


def default_styles() -> Dict[str, Style]:
    return {
        "module": style("white", "bold"),
        "public": style("green", "bold"),
        "protected": style("yellow", "bold"),
        "private": style("red", "bold"),
        "overridden": style("dark_grey", "bold"),
    }


def plain_styles() -> Dict[str, Style]:
    """Styles that leave text untouched."""
    return {
        category: _identity
        for category in ("module", "public", "protected", "private", "overridden")
    }


def default_options() -> LookupPathOptions:
    return {"public": True, "protected": True, "overridden": True}


@dataclasses.dataclass
class Config:
    """Settings read by :func:`looksee.lookup_path` and :meth:`LookupPath.render`.

    Attributes:
        default_options: Options used when a query doesn't override them.
        default_width: Width to render at when neither an explicit width nor the
            `COLUMNS` environment variable is available.
        styles: Formatter for each of `module`, `public`, `protected`, `private`
            and `overridden`. Each takes a name and returns the styled name.
    """

    default_options: LookupPathOptions = dataclasses.field(
        default_factory=default_options
    )
    default_width: int = 80
    styles: Dict[str, Style] = dataclasses.field(default_factory=default_styles)

    def resolve_width(self, width: Optional[int] = None) -> int:
        """Width to render at: `width` if given, otherwise `$COLUMNS`, otherwise
        `default_width`."""
        if width is not None:
            return width
        columns = os.environ.get("COLUMNS", "")
        if columns != "":
            try:
                env_width = int(columns)
            except ValueError:
                warnings.warn(
                    f"Ignoring COLUMNS={columns!r}, which is not an integer.",
                    category=LookseeWarning,
                )
            else:
                if env_width != 0:
                    return env_width
        return self.default_width


config = Config()
"""Process-wide configuration. Changes apply to subsequent queries and renders."""


@contextlib.contextmanager
def config_context(**changes: Any) -> Iterator[Config]:
    """Temporarily replace fields of the process-wide :data:`config`. Not
    thread-safe."""
    field_names = {field.name for field in dataclasses.fields(config)}
    for name in changes:
        if name not in field_names:
            raise TypeError(f"{name!r} is not a looksee configuration field")
    restore = {name: getattr(config, name) for name in changes}
    for name, value in changes.items():
        setattr(config, name, value)
    try:
        yield config
    finally:
        for name, value in restore.items():
            setattr(config, name, value)

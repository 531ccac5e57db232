# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element factory functions for every HTML5 tag.

Factories are created on attribute access (module ``__getattr__``), so
``from genro_vdom.elements import div, p, img`` works for any name in
:data:`~genro_vdom.schema.HTML5_ELEMENTS`. Names that clash with Python
keywords or builtins take a trailing underscore (``del_``, ``object_``,
``map_``); the underscore is also accepted on any other tag.

Each factory has the signature ``factory(*items, **attr) -> Tag`` and
follows the item rules of :meth:`genro_vdom.tag.Tag.create`. Use
:func:`tag` for custom elements.

Example:
    >>> from genro_vdom.elements import div, h3, p
    >>> from genro_vdom.attributes import class_
    >>> div(class_('card'), h3('Title'), p('Body & more')).to_html()
    '<div class="card"><h3>Title</h3><p>Body &amp; more</p></div>'
    >>> tag('my-widget', 'hello', size=3).to_html()
    '<my-widget size="3">hello</my-widget>'
"""

from __future__ import annotations

from typing import Any, Callable

from .schema import DEFAULT_SCHEMA
from .tag import Tag

# Exported with a trailing underscore to avoid shadowing
_RESERVED = frozenset({'del', 'object', 'map'})


def _export_name(tag_name: str) -> str:
    return f"{tag_name}_" if tag_name in _RESERVED else tag_name


__all__ = ['tag', *sorted(_export_name(t) for t in DEFAULT_SCHEMA.ALL_TAGS)]


def tag(tag_name: str, *items: Any, **attr: Any) -> Tag:
    """Generic element factory: any valid tag name."""
    return Tag.create(tag_name, *items, **attr)


def _make_factory(tag_name: str) -> Callable[..., Tag]:
    """Create the factory function for a specific tag."""

    def factory(*items: Any, **attr: Any) -> Tag:
        return Tag.create(tag_name, *items, **attr)

    factory.__name__ = _export_name(tag_name)
    factory.__qualname__ = factory.__name__
    factory.__doc__ = f"Create a <{tag_name}> element."
    return factory


def __getattr__(name: str) -> Callable[..., Tag]:
    """Dynamic factory for any HTML tag.

    Raises:
        AttributeError: If name is not a known HTML tag.
    """
    if name.startswith('_'):
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    tag_name = name[:-1] if name.endswith('_') else name
    if DEFAULT_SCHEMA.is_known(tag_name):
        return _make_factory(tag_name)

    raise AttributeError(f"'{name}' is not a valid HTML tag")


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - the capability of being converted to a VNode.

Anything with a ``to_vnode()`` method is an Element: builders, text
helpers, conditional results and VNodes themselves. ``isinstance(obj,
Element)`` checks for the method, so third-party classes qualify
without subclassing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

from .node import VRaw, VText

if TYPE_CHECKING:
    from .node import VNode


class Element(ABC):
    """Abstract base for everything that renders to a VNode.

    Subclasses implement :meth:`to_vnode`; :meth:`to_html` and the
    ``__html__`` protocol (understood by template engines) come for
    free.
    """

    __slots__ = ()

    @abstractmethod
    def to_vnode(self) -> VNode:
        """Convert this element to a VNode."""

    def to_html(self) -> str:
        """Render this element to an HTML string."""
        from .render import serialize
        return serialize(self.to_vnode())

    def __html__(self) -> str:
        return self.to_html()

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is Element:
            if any('to_vnode' in base.__dict__ for base in subclass.__mro__):
                return True
        return NotImplemented


class TextElement(Element):
    """Text content, escaped (default) or raw.

    Use :func:`text` and :func:`raw` rather than the constructor.
    """

    __slots__ = ('_content', '_raw')

    def __init__(self, content: Any = '', raw: bool = False) -> None:
        if content is None:
            content = ''
        self._content = content if isinstance(content, str) else str(content)
        self._raw = raw

    @property
    def content(self) -> str:
        return self._content

    @property
    def is_raw(self) -> bool:
        return self._raw

    def to_vnode(self) -> VNode:
        return VRaw(self._content) if self._raw else VText(self._content)

    def __repr__(self) -> str:
        kind = 'raw' if self._raw else 'text'
        return f"{kind}({self._content!r})"


def text(content: Any) -> TextElement:
    """Escaped text element."""
    return TextElement(content)


def raw(content: Any) -> TextElement:
    """Raw (unescaped) element.

    WARNING: only for trusted content such as pre-rendered HTML or inline
    SVG. Never pass user input.
    """
    return TextElement(content, raw=True)

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""VNode classes - the immutable rendered tree.

A VNode is one of four variants:

- VElement: a tag with ordered attributes and ordered children
- VText: text content, HTML-escaped on output
- VRaw: content emitted verbatim (trusted input only)
- VFragment: an ordered list of nodes with no wrapping tag

VNodes never change after construction. Builders (see
:class:`genro_vdom.tag.Tag`) keep their own mutable state and produce a
fresh VNode on each ``to_vnode()`` call.

Example:
    >>> node = VElement('p', {'class': 'lead'}, [VText('Fish & chips')])
    >>> node.to_html()
    '<p class="lead">Fish &amp; chips</p>'
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, TYPE_CHECKING

from .exceptions import VoidElementError
from .schema import DEFAULT_SCHEMA

if TYPE_CHECKING:
    from .schema import HtmlSchema

logger = logging.getLogger(__name__)


def attribute_value(value: Any) -> str | None:
    """Normalize an attribute value to its stored string form.

    Returns:
        '' for boolean attributes (None or True), None if the attribute
        must be omitted (False), otherwise str(value).
    """
    if value is None or value is True:
        return ''
    if value is False:
        return None
    if isinstance(value, str):
        return value
    return str(value)


class VNode:
    """Base class for all rendered tree nodes."""

    __slots__ = ()

    def to_html(self) -> str:
        """Serialize this node to an HTML string."""
        from .render import serialize
        return serialize(self)

    def to_vnode(self) -> VNode:
        """A VNode is already a VNode; lets nodes be used as Elements."""
        return self

    def __html__(self) -> str:
        return self.to_html()


class VText(VNode):
    """Text node, escaped on serialization.

    Args:
        content: The text. None becomes an empty string, other
            non-string values are converted with str().
    """

    __slots__ = ('_content',)

    def __init__(self, content: Any = '') -> None:
        if content is None:
            content = ''
        self._content = content if isinstance(content, str) else str(content)

    @property
    def content(self) -> str:
        return self._content

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VText):
            return NotImplemented
        return self._content == other._content

    def __hash__(self) -> int:
        return hash(('text', self._content))

    def __repr__(self) -> str:
        return f"VText({self._content!r})"


class VRaw(VNode):
    """Raw node, emitted verbatim.

    WARNING: the content is not escaped. Never build a VRaw from
    untrusted input; doing so is an XSS hole.
    """

    __slots__ = ('_content',)

    def __init__(self, content: Any = '') -> None:
        if content is None:
            content = ''
        self._content = content if isinstance(content, str) else str(content)

    @property
    def content(self) -> str:
        return self._content

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VRaw):
            return NotImplemented
        return self._content == other._content

    def __hash__(self) -> int:
        return hash(('raw', self._content))

    def __repr__(self) -> str:
        return f"VRaw({self._content!r})"


def _check_children(children: Iterable[VNode] | None) -> tuple[VNode, ...]:
    if children is None:
        return ()
    result = tuple(children)
    for child in result:
        if not isinstance(child, VNode):
            raise TypeError(
                f"VNode children must be VNode instances, got {type(child).__name__}"
            )
    return result


class VFragment(VNode):
    """A sequence of nodes with no wrapping tag.

    On serialization the children are concatenated in order, so a
    fragment flattens into its parent's child list.
    """

    __slots__ = ('_children',)

    def __init__(self, children: Iterable[VNode] | None = None) -> None:
        self._children = _check_children(children)

    @property
    def children(self) -> tuple[VNode, ...]:
        return self._children

    def __len__(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VFragment):
            return NotImplemented
        return self._children == other._children

    def __hash__(self) -> int:
        return hash(('fragment', self._children))

    def __repr__(self) -> str:
        return f"VFragment({list(self._children)!r})"


class VElement(VNode):
    """An element node: tag name, attributes and children.

    The tag name is validated and lower-cased. Attribute names are
    validated against the schema; values are normalized with
    :func:`attribute_value` (None and True mean a boolean attribute,
    False drops the attribute).

    Void elements never carry children. Children passed to a void
    element are dropped with a warning, or rejected with
    VoidElementError when strict is True.

    Args:
        tag: The element's tag name.
        attributes: Mapping of attribute name to value, in order.
        children: Child VNodes, in order.
        void: Force void (True) or non-void (False). None asks the schema.
        strict: Raise instead of dropping children on void elements.
        schema: The HtmlSchema used for validation. Defaults to
            DEFAULT_SCHEMA.

    Raises:
        InvalidTagNameError: If tag is malformed.
        InvalidAttributeNameError: If an attribute name is malformed.
        VoidElementError: In strict mode, if a void element has children.
    """

    __slots__ = ('_tag', '_attributes', '_children', '_void', '_strict', '_schema')

    def __init__(
        self,
        tag: str,
        attributes: Mapping[str, Any] | None = None,
        children: Iterable[VNode] | None = None,
        *,
        void: bool | None = None,
        strict: bool = False,
        schema: HtmlSchema | None = None,
    ) -> None:
        schema = schema or DEFAULT_SCHEMA
        self._schema = schema
        self._strict = strict
        self._tag = schema.check_tag_name(tag).lower()
        self._void = schema.is_void(self._tag) if void is None else void

        attrs: dict[str, str] = {}
        for name, value in (attributes or {}).items():
            schema.check_attribute_name(name)
            normalized = attribute_value(value)
            if normalized is not None:
                attrs[name] = normalized
        self._attributes = MappingProxyType(attrs)

        nodes = _check_children(children)
        if self._void and nodes:
            if strict:
                raise VoidElementError(
                    f"Void element <{self._tag}> cannot have children"
                )
            logger.warning(
                "Dropping %d children of void element <%s>", len(nodes), self._tag
            )
            nodes = ()
        self._children = nodes

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attributes, in insertion order."""
        return self._attributes

    @property
    def children(self) -> tuple[VNode, ...]:
        return self._children

    @property
    def is_void(self) -> bool:
        return self._void

    @property
    def id(self) -> str | None:
        """The element's id attribute, if set."""
        return self._attributes.get('id')

    def with_attribute(self, name: str, value: Any) -> VElement:
        """Return a copy with one attribute set (last write wins)."""
        attrs = dict(self._attributes)
        attrs[name] = value
        return self._copy(attrs, self._children)

    def with_child(self, child: VNode) -> VElement:
        """Return a copy with child appended.

        Raises:
            VoidElementError: If this is a void element.
        """
        if self._void:
            raise VoidElementError(f"Void element <{self._tag}> cannot have children")
        return self._copy(self._attributes, self._children + (child,))

    def _copy(self, attributes: Mapping[str, Any], children: tuple[VNode, ...]) -> VElement:
        return VElement(
            self._tag,
            attributes,
            children,
            void=self._void,
            strict=self._strict,
            schema=self._schema,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VElement):
            return NotImplemented
        return (
            self._tag == other._tag
            and list(self._attributes.items()) == list(other._attributes.items())
            and self._children == other._children
            and self._void == other._void
        )

    def __hash__(self) -> int:
        return hash((
            'element', self._tag, tuple(self._attributes.items()), self._children
        ))

    def __repr__(self) -> str:
        return (
            f"VElement({self._tag!r}, {dict(self._attributes)!r}, "
            f"{list(self._children)!r})"
        )


def walk(node: VNode, depth: int = 0) -> Iterator[tuple[int, VNode]]:
    """Iterate over a tree depth-first, yielding (depth, node) pairs.

    Fragment children are reported one level below the fragment.

    Example:
        >>> tree = VElement('ul', children=[VElement('li', children=[VText('a')])])
        >>> [(d, type(n).__name__) for d, n in walk(tree)]
        [(0, 'VElement'), (1, 'VElement'), (2, 'VText')]
    """
    yield depth, node
    if isinstance(node, (VElement, VFragment)):
        for child in node.children:
            yield from walk(child, depth + 1)


EMPTY = VFragment()

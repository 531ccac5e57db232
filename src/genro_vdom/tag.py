# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag - fluent element builder and the variadic item partitioning.

Every element factory ends up in :meth:`Tag.create`, which splits an
untyped item list into attributes and children in a single ordered pass:

- ``None`` is skipped
- Attr, Attributes, InlineStyle and plain mappings are attribute
  carriers; their keys are merged into the attribute map, later keys
  overwrite earlier ones
- other iterables (lists, tuples, generators, ...) are flattened
  recursively with the same rules; strings and bytes are not iterables
  here
- everything else becomes a child: Elements and VNodes through
  ``to_vnode()``, anything else as escaped text via ``str()``

Example:
    >>> t = Tag.create('div', class_('card'), [h3('Title'), None], 'Body')
    >>> t.to_html()
    '<div class="card"><h3>Title</h3>Body</div>'

A Tag is a mutable, single-owner builder: build it in one request and
discard it. Do not share Tags between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, TypeVar, TYPE_CHECKING

from .attributes import Attr, Attributes, InlineStyle, attribute_name
from .element import Element
from .exceptions import DuplicateAttributeError, VoidElementError
from .node import VElement, VFragment, VNode, VRaw, VText
from .schema import DEFAULT_SCHEMA

if TYPE_CHECKING:
    from .schema import HtmlSchema

_T = TypeVar('_T')


def is_attribute_carrier(item: Any) -> bool:
    """True if item contributes attributes rather than children."""
    return isinstance(item, (Attr, Attributes, InlineStyle, Mapping))


def _carrier_items(item: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(item, Attr):
        return ((item.name, item.value),)
    if isinstance(item, (Attributes, InlineStyle)):
        return item.to_dict().items()
    return item.items()


def _is_flattenable(item: Any) -> bool:
    return isinstance(item, Iterable) and not isinstance(
        item, (str, bytes, bytearray, VNode, Element)
    )


def to_vnode(child: Any) -> VNode:
    """Convert a single child item to a VNode.

    None becomes an empty fragment; VNodes are returned as is; Elements
    are converted with ``to_vnode()``; iterables become a fragment of
    their flattened items; anything else becomes escaped text.

    Raises:
        TypeError: If child is an attribute carrier, which has no
            element to attach to, or an iterable holding one.
    """
    if child is None:
        return VFragment()
    if isinstance(child, VNode):
        return child
    if isinstance(child, Element):
        return child.to_vnode()
    if is_attribute_carrier(child):
        raise TypeError(f"{type(child).__name__} is an attribute, not a child")
    if _is_flattenable(child):
        attributes, children = partition(child)
        if attributes:
            raise TypeError(f"Attributes {list(attributes)} have no element to attach to")
        return VFragment(children)
    return VText(child)


def partition(
    items: Iterable[Any],
    strict: bool = False,
) -> tuple[dict[str, Any], list[VNode]]:
    """Split items into an attribute map and a flat child list.

    Args:
        items: Mixed attribute carriers, children and iterables.
        strict: If True, a repeated attribute name raises
            DuplicateAttributeError instead of overwriting.

    Returns:
        Tuple of (attributes, children), both in encounter order.

    The function has no side effects: the same input always yields the
    same output.
    """
    attributes: dict[str, Any] = {}
    children: list[VNode] = []
    _partition_into(items, attributes, children, strict)
    return attributes, children


def _partition_into(
    items: Iterable[Any],
    attributes: dict[str, Any],
    children: list[VNode],
    strict: bool,
) -> None:
    for item in items:
        if item is None:
            continue
        if is_attribute_carrier(item):
            for key, value in _carrier_items(item):
                if strict and key in attributes:
                    raise DuplicateAttributeError(f"Attribute '{key}' set twice")
                attributes[key] = value
        elif _is_flattenable(item):
            _partition_into(item, attributes, children, strict)
        else:
            children.append(to_vnode(item))


def extract_attributes(*items: Any) -> dict[str, Any]:
    """Attribute half of :func:`partition`."""
    return partition(items)[0]


def to_vnodes(*items: Any) -> list[VNode]:
    """Child half of :func:`partition`."""
    return partition(items)[1]


class Tag(Element):
    """Mutable builder for an element node.

    Holds a tag name, an ordered attribute map and an ordered child
    list. Fluent methods mutate the builder and return it; to_vnode()
    takes an immutable snapshot and can be called any number of times.

    Args:
        tag_name: The element's tag name (validated immediately).
        attributes: Initial attributes (mapping or Attributes).
        children: Initial child VNodes.
        strict: If True, attr() refuses to overwrite an existing
            attribute and void elements refuse children.
        schema: HtmlSchema for validation and the void-element set.

    Raises:
        InvalidTagNameError: If tag_name is malformed.

    Example:
        >>> Tag('ul').each(['a', 'b'], lambda s: Tag('li').text(s)).to_html()
        '<ul><li>a</li><li>b</li></ul>'
    """

    __slots__ = ('_tag_name', '_attributes', '_children', '_strict', '_schema')

    def __init__(
        self,
        tag_name: str,
        attributes: Mapping[str, Any] | Attributes | None = None,
        children: Iterable[VNode] | None = None,
        *,
        strict: bool = False,
        schema: HtmlSchema | None = None,
    ) -> None:
        self._schema = schema or DEFAULT_SCHEMA
        self._tag_name = self._schema.check_tag_name(tag_name)
        self._strict = strict
        self._attributes: dict[str, Any] = {}
        self._children: list[VNode] = []
        if attributes:
            initial = attributes.to_dict() if isinstance(attributes, Attributes) else attributes
            for key, value in initial.items():
                self.attr(key, value)
        if children:
            for child in children:
                self._append(to_vnode(child))

    @classmethod
    def create(
        cls,
        tag_name: str,
        *items: Any,
        _strict: bool = False,
        _schema: HtmlSchema | None = None,
        **attr: Any,
    ) -> Tag:
        """Create a Tag from mixed attribute items and children.

        Keyword arguments are attributes applied after the positional
        items; their names go through
        :func:`~genro_vdom.attributes.attribute_name`
        (``class_='x'`` -> ``class="x"``).

        Example:
            >>> Tag.create('a', href('/'), 'Home', class_='nav').to_html()
            '<a href="/" class="nav">Home</a>'
        """
        attributes, children = partition(items, strict=_strict)
        for key, value in attr.items():
            name = attribute_name(key)
            if _strict and name in attributes:
                raise DuplicateAttributeError(f"Attribute '{name}' set twice")
            attributes[name] = value
        return cls(tag_name, attributes, children, strict=_strict, schema=_schema)

    def __repr__(self) -> str:
        return (
            f"Tag({self._tag_name!r}, attributes={self._attributes!r}, "
            f"children={len(self._children)})"
        )

    def to_vnode(self) -> VElement:
        return VElement(
            self._tag_name,
            self._attributes,
            self._children,
            strict=self._strict,
            schema=self._schema,
        )

    # ==================== Accessors ====================

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the current attributes."""
        return dict(self._attributes)

    @property
    def child_nodes(self) -> list[VNode]:
        """Copy of the current children."""
        return list(self._children)

    @property
    def strict(self) -> bool:
        return self._strict

    def _append(self, node: VNode) -> None:
        if self._strict and self._schema.is_void(self._tag_name):
            raise VoidElementError(
                f"Void element <{self._tag_name}> cannot have children"
            )
        self._children.append(node)

    # ==================== Attributes ====================

    def attr(self, name: str, value: Any = None) -> Tag:
        """Set an attribute; a later call with the same name overwrites.

        Raises:
            InvalidAttributeNameError: If name is malformed.
            DuplicateAttributeError: In strict mode, if name is already set.
        """
        self._schema.check_attribute_name(name)
        if self._strict and name in self._attributes:
            raise DuplicateAttributeError(
                f"Attribute '{name}' already set on <{self._tag_name}>"
            )
        self._attributes[name] = value
        return self

    def attrs(self, _attr: Mapping[str, Any] | Attributes | None = None, **kwargs: Any) -> Tag:
        """Set several attributes from a mapping and/or keywords."""
        if isinstance(_attr, Attributes):
            _attr = _attr.to_dict()
        for key, value in (_attr or {}).items():
            self.attr(key, value)
        for key, value in kwargs.items():
            self.attr(attribute_name(key), value)
        return self

    def id(self, value: str) -> Tag:
        return self.attr('id', value)

    def class_(self, value: str) -> Tag:
        return self.attr('class', value)

    def add_class(self, class_name: str) -> Tag:
        """Append a class to the class list (never strict)."""
        existing = self._attributes.get('class')
        self._attributes['class'] = f"{existing} {class_name}" if existing else class_name
        return self

    def style(self, value: str | InlineStyle | None = None, **props: Any) -> Tag:
        """Set the style attribute from a string, an InlineStyle or keywords."""
        return self.attr('style', Attributes().style(value, **props).get('style'))

    def data(self, name: str, value: Any) -> Tag:
        return self.attr(f"data-{name}", value)

    def aria(self, name: str, value: Any) -> Tag:
        return self.attr(f"aria-{name}", value)

    def _flag(self, name: str, on: bool) -> Tag:
        if on:
            return self.attr(name, '')
        self._attributes.pop(name, None)
        return self

    def disabled(self, on: bool = True) -> Tag:
        return self._flag('disabled', on)

    def checked(self, on: bool = True) -> Tag:
        return self._flag('checked', on)

    def required(self, on: bool = True) -> Tag:
        return self._flag('required', on)

    def readonly(self, on: bool = True) -> Tag:
        return self._flag('readonly', on)

    def hidden(self, on: bool = True) -> Tag:
        return self._flag('hidden', on)

    def autofocus(self, on: bool = True) -> Tag:
        return self._flag('autofocus', on)

    # ==================== Content ====================

    def text(self, content: Any) -> Tag:
        """Append escaped text. div().text('Hello') -> <div>Hello</div>"""
        self._append(VText(content))
        return self

    def unsafe_html(self, html: str) -> Tag:
        """Append raw, unescaped HTML.

        WARNING: never use with user input, it bypasses escaping.
        """
        self._append(VRaw(html))
        return self

    raw = unsafe_html

    def child(self, child: Any) -> Tag:
        """Append one child, following the factory item rules.

        None is ignored, iterables are flattened and attribute carriers
        set attributes on this tag.
        """
        return self.children(child)

    def children(self, *elements: Any) -> Tag:
        """Append several items; iterables are flattened, None skipped.

        Attribute carriers among the items go through attr(), so strict
        builders still refuse duplicates.
        """
        attributes, nodes = partition(elements)
        for key, value in attributes.items():
            self.attr(key, value)
        for node in nodes:
            self._append(node)
        return self

    def each(self, items: Iterable[_T], mapper: Callable[[_T], Any]) -> Tag:
        """Append mapper(item) for each item; None results are skipped.

        Example:
            >>> Tag('ul').each([1, 2], lambda n: Tag('li').text(n)).to_html()
            '<ul><li>1</li><li>2</li></ul>'
        """
        for item in items:
            self.child(mapper(item))
        return self

    def when(self, condition: bool, element: Callable[[], Any] | Any) -> Tag:
        """Append a child only if condition is true.

        With a callable, the callable runs only when condition is true.
        A ready-made element is appended as is; note that the caller
        has already built it whatever the condition.
        """
        if condition:
            self.child(element() if callable(element) else element)
        return self

    def if_else(
        self,
        condition: bool,
        if_true: Callable[[], Any],
        if_false: Callable[[], Any],
    ) -> Tag:
        """Append the result of exactly one of two suppliers."""
        self.child(if_true() if condition else if_false())
        return self

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlSchema - tag names, void elements and name validation.

The schema answers three questions for the rest of the package:

- is a tag name well formed (``[A-Za-z][A-Za-z0-9-]*``)?
- is an attribute name safe to emit inside a start tag?
- is a tag a void element (no children, no closing tag)?

It also carries the set of known HTML5 element names used by the
dynamic factories in :mod:`genro_vdom.elements`.

Example:
    >>> schema = HtmlSchema(void_elements={'br', 'img', 'x-icon'})
    >>> schema.is_void('x-icon')
    True
    >>> schema.check_tag_name('my-widget')
    'my-widget'

References:
    - WHATWG HTML Standard, void elements:
      https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - WHATWG HTML Standard, attributes:
      https://html.spec.whatwg.org/multipage/syntax.html#attributes-2
"""

from __future__ import annotations

import re
from typing import Iterable

from .exceptions import InvalidAttributeNameError, InvalidTagNameError


TAG_NAME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9-]*')

# Attribute names: no whitespace, quotes, '>', '/', '=' or control chars
ATTRIBUTE_NAME_PATTERN = re.compile(r'[^\s"\'>/=\x00-\x1f\x7f]+')

HTML5_VOID_ELEMENTS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

HTML5_ELEMENTS: frozenset[str] = frozenset({
    # Document and metadata
    'html', 'head', 'body', 'title', 'base', 'link', 'meta', 'style',
    'script', 'noscript', 'template', 'slot',
    # Sections
    'header', 'footer', 'nav', 'main', 'section', 'article', 'aside',
    'address', 'hgroup', 'search',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    # Grouping
    'div', 'p', 'hr', 'pre', 'blockquote', 'ol', 'ul', 'menu', 'li',
    'dl', 'dt', 'dd', 'figure', 'figcaption',
    # Text-level
    'a', 'em', 'strong', 'small', 's', 'cite', 'q', 'dfn', 'abbr',
    'ruby', 'rt', 'rp', 'data', 'time', 'code', 'var', 'samp', 'kbd',
    'sub', 'sup', 'i', 'b', 'u', 'mark', 'bdi', 'bdo', 'span', 'br',
    'wbr', 'ins', 'del',
    # Embedded
    'picture', 'source', 'img', 'iframe', 'embed', 'object', 'param',
    'video', 'audio', 'track', 'map', 'area', 'canvas', 'svg', 'math',
    # Tables
    'table', 'caption', 'colgroup', 'col', 'tbody', 'thead', 'tfoot',
    'tr', 'td', 'th',
    # Forms
    'form', 'label', 'input', 'button', 'select', 'datalist',
    'optgroup', 'option', 'textarea', 'output', 'progress', 'meter',
    'fieldset', 'legend',
    # Interactive
    'details', 'summary', 'dialog',
})


class HtmlSchema:
    """Validation rules and void-element set for a tree.

    Instances are immutable once built; share one freely between
    requests.

    Args:
        void_elements: Tags rendered without children or closing tag.
            Defaults to the HTML5 void elements.
        elements: Known element names for the dynamic factories.
            Defaults to the HTML5 elements.
        validate_attributes: If True (default), attribute names are
            checked eagerly and invalid ones raise
            InvalidAttributeNameError. If False, names are trusted.
    """

    __slots__ = ('_void_elements', '_elements', '_validate_attributes')

    def __init__(
        self,
        void_elements: Iterable[str] | None = None,
        elements: Iterable[str] | None = None,
        validate_attributes: bool = True,
    ) -> None:
        self._void_elements = (
            HTML5_VOID_ELEMENTS if void_elements is None
            else frozenset(t.lower() for t in void_elements)
        )
        self._elements = (
            HTML5_ELEMENTS if elements is None
            else frozenset(t.lower() for t in elements)
        )
        self._validate_attributes = validate_attributes

    def __repr__(self) -> str:
        return (
            f"HtmlSchema(void_elements={len(self._void_elements)}, "
            f"elements={len(self._elements)}, "
            f"validate_attributes={self._validate_attributes})"
        )

    @property
    def VOID_ELEMENTS(self) -> frozenset[str]:
        """Void elements (no content, no closing tag)."""
        return self._void_elements

    @property
    def ALL_TAGS(self) -> frozenset[str]:
        """All known element names."""
        return self._elements

    @property
    def validate_attributes(self) -> bool:
        return self._validate_attributes

    def is_void(self, tag: str) -> bool:
        """True if tag is a void element (case-insensitive)."""
        return tag.lower() in self._void_elements

    def is_known(self, tag: str) -> bool:
        """True if tag is one of the known element names."""
        return tag.lower() in self._elements

    def check_tag_name(self, tag: str) -> str:
        """Validate a tag name.

        Args:
            tag: The tag name to check.

        Returns:
            The tag name, unchanged.

        Raises:
            InvalidTagNameError: If tag is not a string matching
                ``[A-Za-z][A-Za-z0-9-]*``.
        """
        if not isinstance(tag, str) or not TAG_NAME_PATTERN.fullmatch(tag):
            raise InvalidTagNameError(f"Invalid tag name: {tag!r}")
        return tag

    def check_attribute_name(self, name: str) -> str:
        """Validate an attribute name.

        Always rejects non-string and empty names. Character checks are
        skipped when the schema was built with validate_attributes=False.

        Raises:
            InvalidAttributeNameError: If the name cannot be emitted.
        """
        if not isinstance(name, str) or not name:
            raise InvalidAttributeNameError(f"Invalid attribute name: {name!r}")
        if self._validate_attributes and not ATTRIBUTE_NAME_PATTERN.fullmatch(name):
            raise InvalidAttributeNameError(f"Invalid attribute name: {name!r}")
        return name


DEFAULT_SCHEMA = HtmlSchema()

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-VDOM - HTML virtual nodes with a fluent, composable builder API.

A lightweight, zero-dependency library: compose attributes, children,
conditionals and collections into an immutable node tree, then
serialize it deterministically to HTML.

Example:
    >>> from genro_vdom import class_, each
    >>> from genro_vdom.elements import div, h3, li, p, ul
    >>> div(class_('card'), h3('Title'), p('Body & more')).to_html()
    '<div class="card"><h3>Title</h3><p>Body &amp; more</p></div>'
    >>> ul(each(['a', 'b'], li)).to_html()
    '<ul><li>a</li><li>b</li></ul>'
"""

__version__ = "0.1.0"

from .attributes import (
    Attr,
    Attributes,
    InlineStyle,
    alt,
    aria,
    attr,
    attrs,
    autofocus,
    checked,
    class_,
    data,
    disabled,
    for_,
    hidden,
    href,
    id_,
    inline_style,
    placeholder,
    readonly,
    required,
    role,
    src,
    style_,
    title_,
    type_,
)
from .boundary import ErrorBoundary, error_boundary, try_render, with_message
from .conditionals import (
    CondCase,
    Condition,
    cond,
    each,
    empty,
    fragment,
    if_else,
    match,
    otherwise,
    unless,
    when,
)
from .document import HtmlPage
from .element import Element, TextElement, raw, text
from .elements import tag
from .exceptions import (
    ConfigurationError,
    DuplicateAttributeError,
    InvalidAttributeNameError,
    InvalidTagNameError,
    VdomError,
    VoidElementError,
)
from .node import VElement, VFragment, VNode, VRaw, VText, walk
from .render import escape_attribute, escape_text, render_document, serialize
from .schema import DEFAULT_SCHEMA, HtmlSchema
from .tag import Tag, partition

__all__ = [
    # Tree model
    "VNode",
    "VElement",
    "VText",
    "VRaw",
    "VFragment",
    "walk",
    # Rendering
    "serialize",
    "render_document",
    "escape_text",
    "escape_attribute",
    # Builders
    "Element",
    "TextElement",
    "Tag",
    "tag",
    "text",
    "raw",
    "partition",
    "HtmlPage",
    # Attributes
    "Attr",
    "Attributes",
    "InlineStyle",
    "attr",
    "attrs",
    "inline_style",
    "id_",
    "class_",
    "style_",
    "href",
    "src",
    "alt",
    "type_",
    "title_",
    "for_",
    "role",
    "placeholder",
    "data",
    "aria",
    "disabled",
    "checked",
    "required",
    "readonly",
    "hidden",
    "autofocus",
    # Conditionals
    "each",
    "when",
    "unless",
    "if_else",
    "Condition",
    "match",
    "cond",
    "otherwise",
    "CondCase",
    "fragment",
    "empty",
    # Error boundary
    "ErrorBoundary",
    "error_boundary",
    "try_render",
    "with_message",
    # Configuration
    "HtmlSchema",
    "DEFAULT_SCHEMA",
    # Exceptions
    "VdomError",
    "ConfigurationError",
    "InvalidTagNameError",
    "InvalidAttributeNameError",
    "DuplicateAttributeError",
    "VoidElementError",
]

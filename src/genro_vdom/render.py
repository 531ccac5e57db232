# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serialization of VNode trees to HTML strings.

Rules:
    - VText: ``& < > " '`` escaped, ``&`` first so nothing is escaped twice
    - VRaw: emitted unchanged
    - VFragment: children concatenated, no wrapper
    - VElement: ``<tag a="v">children</tag>``; attributes with an empty
      value use the bareword form (``disabled``); void elements emit
      only the start tag

Serialization of a valid tree cannot fail and has no side effects, so
calling it twice on the same node yields identical output.

Example:
    >>> from genro_vdom.node import VElement, VText
    >>> serialize(VElement('div', {'class': 'card'}, [VText('a < b')]))
    '<div class="card">a &lt; b</div>'
"""

from __future__ import annotations

from html import escape as html_escape

from .node import VElement, VFragment, VNode, VRaw, VText


DOCTYPE = '<!DOCTYPE html>'


def escape_text(text: str) -> str:
    """Escape text content for HTML."""
    return html_escape(text, quote=True)


def escape_attribute(value: str) -> str:
    """Escape a double-quoted attribute value; single quotes are kept."""
    return html_escape(value, quote=False).replace('"', '&quot;')


def start_tag(node: VElement) -> str:
    """Build the start tag of an element, attributes included."""
    parts = [f"<{node.tag}"]
    for name, value in node.attributes.items():
        if value == '':
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape_attribute(value)}"')
    parts.append('>')
    return ''.join(parts)


def _render_into(node: VNode, out: list[str]) -> None:
    if isinstance(node, VText):
        out.append(escape_text(node.content))
    elif isinstance(node, VRaw):
        out.append(node.content)
    elif isinstance(node, VFragment):
        for child in node.children:
            _render_into(child, out)
    elif isinstance(node, VElement):
        out.append(start_tag(node))
        if node.is_void:
            return
        for child in node.children:
            _render_into(child, out)
        out.append(f"</{node.tag}>")
    else:
        raise TypeError(f"Cannot serialize {type(node).__name__}")


def serialize(node: VNode) -> str:
    """Serialize a VNode tree to an HTML string.

    Args:
        node: Root of the tree.

    Returns:
        The HTML markup.
    """
    out: list[str] = []
    _render_into(node, out)
    return ''.join(out)


def render_document(node: VNode) -> str:
    """Serialize a tree as a complete document, with doctype."""
    return DOCTYPE + serialize(node)

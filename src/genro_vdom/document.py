# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlPage - a complete HTML document with head and body builders.

Example:
    Building a page::

        from genro_vdom import HtmlPage, class_
        from genro_vdom.elements import h1, meta, p

        page = HtmlPage(title='Welcome', lang='en')
        page.head.child(meta(charset='utf-8'))
        page.body.children(
            h1('Welcome'),
            p(class_('lead'), 'Hello, World!'),
        )
        html = page.to_html()
"""

from __future__ import annotations

import logging
from pathlib import Path

from .element import Element
from .node import VElement, VFragment, VNode, VRaw, VText, walk
from .render import render_document
from .tag import Tag

logger = logging.getLogger(__name__)


class HtmlPage(Element):
    """HTML page with separate head and body builders.

    Creates a complete HTML document structure with:
    - html root element (with optional lang attribute)
    - head Tag, pre-filled with <title> when title is given
    - body Tag for flow content

    Usage:
        >>> page = HtmlPage(title='My Page')
        >>> page.body.child(Tag('p').text('Hello World'))
        >>> page.to_html()
        '<!DOCTYPE html><html><head><title>My Page</title></head><body><p>Hello World</p></body></html>'
    """

    def __init__(self, title: str | None = None, lang: str | None = None) -> None:
        """Initialize the page with head and body."""
        self.html = Tag('html')
        if lang:
            self.html.attr('lang', lang)
        self.head = Tag('head')
        self.body = Tag('body')
        if title is not None:
            self.head.child(Tag('title').text(title))

    def to_vnode(self) -> VElement:
        """The <html> element with head and body."""
        root = self.html.to_vnode()
        return root.with_child(self.head.to_vnode()).with_child(self.body.to_vnode())

    def to_html(self, filename: str | None = None, output_dir: str | None = None) -> str:
        """Generate the complete document, doctype included.

        Args:
            filename: If provided, save to output_dir/filename
            output_dir: Directory to save to (default: current directory)

        Returns:
            HTML string, or path if filename was provided
        """
        html_content = render_document(self.to_vnode())

        if filename:
            if output_dir is None:
                output_dir = Path.cwd()
            else:
                output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / filename
            output_path.write_text(html_content, encoding='utf-8')
            logger.debug("Wrote %d characters to %s", len(html_content), output_path)
            return str(output_path)

        return html_content

    def print_tree(self) -> None:
        """Print the tree structure for debugging."""
        for section, builder in (('HEAD', self.head), ('BODY', self.body)):
            print("=" * 60)
            print(section)
            print("=" * 60)
            for depth, node in walk(builder.to_vnode()):
                print(f"{'  ' * depth}{describe(node)}")


def describe(node: VNode) -> str:
    """One-line description of a node, for tree dumps."""
    if isinstance(node, VElement):
        attrs = " ".join(f'{k}="{v}"' for k, v in node.attributes.items())
        attrs_str = f" [{attrs}]" if attrs else ""
        return f"<{node.tag}{attrs_str}>"
    if isinstance(node, (VText, VRaw)):
        val = node.content
        value_str = f'{val[:30]}...' if len(val) > 30 else val
        kind = 'raw' if isinstance(node, VRaw) else 'text'
        return f'{kind}: "{value_str}"'
    if isinstance(node, VFragment):
        return f"fragment({len(node)})"
    return repr(node)

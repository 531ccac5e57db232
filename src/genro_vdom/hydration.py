# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dict/JSON form of VNode trees, for client-side hydration.

Format::

    {"type": "element", "tag": "div", "attrs": {"id": "main"}, "children": [...]}
    {"type": "text", "content": "Hello World"}
    {"type": "raw", "html": "<b>Bold</b>"}
    {"type": "fragment", "children": [...]}

Empty ``attrs`` and ``children`` are omitted. Boolean attributes are
encoded as ``true``.
"""

from __future__ import annotations

import json
from typing import Any

from .node import VElement, VFragment, VNode, VRaw, VText


def to_dict(node: VNode) -> dict[str, Any]:
    """Convert a VNode tree to plain dicts and lists."""
    if isinstance(node, VText):
        return {'type': 'text', 'content': node.content}
    if isinstance(node, VRaw):
        return {'type': 'raw', 'html': node.content}
    if isinstance(node, VFragment):
        result: dict[str, Any] = {'type': 'fragment'}
        if node.children:
            result['children'] = [to_dict(c) for c in node.children]
        return result
    if isinstance(node, VElement):
        result = {'type': 'element', 'tag': node.tag}
        if node.attributes:
            result['attrs'] = {
                k: (True if v == '' else v) for k, v in node.attributes.items()
            }
        if node.children:
            result['children'] = [to_dict(c) for c in node.children]
        return result
    raise TypeError(f"Cannot convert {type(node).__name__} to dict")


def from_dict(data: dict[str, Any]) -> VNode:
    """Rebuild a VNode tree from :func:`to_dict` output.

    Raises:
        ValueError: If a node has an unknown or missing type.
    """
    node_type = data.get('type')
    if node_type == 'text':
        return VText(data.get('content', ''))
    if node_type == 'raw':
        return VRaw(data.get('html', ''))
    children = [from_dict(c) for c in data.get('children', ())]
    if node_type == 'fragment':
        return VFragment(children)
    if node_type == 'element':
        attrs = {
            k: (None if v is True else v) for k, v in data.get('attrs', {}).items()
        }
        return VElement(data['tag'], attrs, children)
    raise ValueError(f"Unknown node type: {node_type!r}")


def to_json(node: VNode | None, **kwargs: Any) -> str:
    """Serialize a tree to JSON; None becomes ``null``.

    Keyword arguments are passed to :func:`json.dumps`.
    """
    kwargs.setdefault('separators', (',', ':'))
    kwargs.setdefault('ensure_ascii', False)
    return json.dumps(None if node is None else to_dict(node), **kwargs)


def from_json(text: str) -> VNode | None:
    """Inverse of :func:`to_json`."""
    data = json.loads(text)
    return None if data is None else from_dict(data)

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the dict/JSON form of node trees."""

import json

import pytest

from genro_vdom import VElement, VFragment, VRaw, VText, class_, each, raw, when
from genro_vdom.elements import button, div, li, ul
from genro_vdom.hydration import from_dict, from_json, to_dict, to_json


class TestHydration:
    """Tests for to_dict, from_dict, to_json and from_json."""

    def test_element_to_dict(self):
        """Test element encoding with a boolean attribute."""
        node = VElement('input', {'type': 'text', 'required': ''})
        assert to_dict(node) == {
            'type': 'element',
            'tag': 'input',
            'attrs': {'type': 'text', 'required': True},
        }

    def test_empty_parts_omitted(self):
        """Test empty attrs and children are left out."""
        assert to_dict(VElement('div')) == {'type': 'element', 'tag': 'div'}
        assert to_dict(VFragment()) == {'type': 'fragment'}

    def test_text_and_raw(self):
        """Test leaf encodings."""
        assert to_dict(VText('hi')) == {'type': 'text', 'content': 'hi'}
        assert to_dict(VRaw('<b>')) == {'type': 'raw', 'html': '<b>'}

    def test_built_tree(self):
        """Test a tree built with the factories encodes to nested dicts."""
        tree = ul(class_('list'), each(['a'], li)).to_vnode()
        assert to_dict(tree) == {
            'type': 'element',
            'tag': 'ul',
            'attrs': {'class': 'list'},
            'children': [{
                'type': 'fragment',
                'children': [{
                    'type': 'element',
                    'tag': 'li',
                    'children': [{'type': 'text', 'content': 'a'}],
                }],
            }],
        }

    def test_json_rebuilds_equal_tree(self):
        """Test from_json(to_json(tree)) gives an equal tree with the same markup."""
        tree = div(
            button('Go', disabled=True, type_='submit'),
            raw('<hr>'),
            when(True, lambda: 'é & <ok>'),
            VFragment([VText('a'), VElement('span', children=[VText('x')])]),
        ).to_vnode()
        rebuilt = from_json(to_json(tree))
        assert rebuilt == tree
        assert rebuilt.to_html() == tree.to_html()

    def test_json_null(self):
        """Test None maps to null."""
        assert to_json(None) == 'null'
        assert from_json('null') is None

    def test_json_compact(self):
        """Test the default JSON form has no spaces."""
        assert to_json(VText('x')) == '{"type":"text","content":"x"}'

    def test_json_kwargs_passed_through(self):
        """Test extra keyword arguments reach json.dumps."""
        text = to_json(div('x').to_vnode(), indent=2)
        assert json.loads(text) == to_dict(div('x').to_vnode())
        assert '\n' in text

    def test_from_dict_defaults(self):
        """Test missing optional keys default to empty."""
        assert from_dict({'type': 'element', 'tag': 'p'}).to_html() == '<p></p>'
        assert from_dict({'type': 'text'}).to_html() == ''

    def test_unknown_type_raises(self):
        """Test unknown node types are rejected."""
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({'type': 'comment'})

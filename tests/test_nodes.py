# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for VNode classes and serialization."""

import html
import logging

import pytest

from genro_vdom import (
    HtmlSchema,
    InvalidAttributeNameError,
    InvalidTagNameError,
    VElement,
    VFragment,
    VRaw,
    VText,
    VoidElementError,
    escape_attribute,
    escape_text,
    render_document,
    serialize,
    walk,
)


class TestVText:
    """Tests for VText."""

    def test_content_is_escaped(self):
        """Test all five special characters are escaped."""
        assert VText('<a href="x">\'&\'</a>').to_html() == (
            '&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;'
        )

    def test_ampersand_escaped_once(self):
        """Test existing entities are escaped, not left alone or doubled."""
        assert VText('&amp;').to_html() == '&amp;amp;'

    @pytest.mark.parametrize('text', [
        '',
        'plain',
        'Fish & chips',
        '<script>alert("x")</script>',
        "it's &lt; already",
        '&&&<<>>""\'\'',
        'café ☃ \n\t',
    ])
    def test_escaping_round_trip(self, text):
        """Test unescaping the output gives back the input."""
        assert html.unescape(serialize(VText(text))) == text

    def test_none_becomes_empty(self):
        """Test None content is an empty string."""
        assert VText(None).content == ''
        assert VText(None).to_html() == ''

    def test_non_string_converted(self):
        """Test numbers are converted with str()."""
        assert VText(42).content == '42'

    def test_equality(self):
        """Test structural equality and hashing."""
        assert VText('a') == VText('a')
        assert VText('a') != VText('b')
        assert VText('a') != VRaw('a')
        assert hash(VText('a')) == hash(VText('a'))


class TestVRaw:
    """Tests for VRaw."""

    @pytest.mark.parametrize('content', [
        '',
        '<script>alert(1)</script>',
        '<b>Bold</b> & "quoted"',
    ])
    def test_passthrough(self, content):
        """Test raw content is emitted unchanged."""
        assert serialize(VRaw(content)) == content

    def test_repr(self):
        """Test string representation."""
        assert repr(VRaw('<b>')) == "VRaw('<b>')"


class TestVFragment:
    """Tests for VFragment."""

    def test_concatenates_children(self):
        """Test a fragment renders its children without a wrapper."""
        frag = VFragment([VText('a'), VElement('b', children=[VText('c')])])
        assert frag.to_html() == 'a<b>c</b>'

    def test_empty_fragment(self):
        """Test an empty fragment renders as nothing."""
        assert VFragment().to_html() == ''
        assert len(VFragment()) == 0

    def test_nested_fragment_flattens_into_parent(self):
        """Test a fragment child renders like inline children."""
        with_fragment = VElement('div', children=[
            VFragment([VText('a'), VText('b')]), VText('c'),
        ])
        flat = VElement('div', children=[VText('a'), VText('b'), VText('c')])
        assert with_fragment.to_html() == flat.to_html() == '<div>abc</div>'

    def test_children_must_be_vnodes(self):
        """Test non-VNode children are rejected."""
        with pytest.raises(TypeError):
            VFragment(['a'])


class TestVElement:
    """Tests for VElement."""

    def test_simple_element(self):
        """Test tag, attributes and children in order."""
        node = VElement('div', {'id': 'main', 'class': 'box'}, [VText('hi')])
        assert node.to_html() == '<div id="main" class="box">hi</div>'

    def test_tag_is_lower_cased(self):
        """Test tag names are normalized to lower case."""
        assert VElement('DIV').tag == 'div'
        assert VElement('DIV').to_html() == '<div></div>'

    def test_attribute_order_preserved(self):
        """Test attributes render in insertion order."""
        node = VElement('a', {'z': '1', 'a': '2', 'm': '3'})
        assert node.to_html() == '<a z="1" a="2" m="3"></a>'

    def test_boolean_attribute_forms_equivalent(self):
        """Test empty string, None and True all give the bareword form."""
        for value in ('', None, True):
            node = VElement('input', {'type': 'checkbox', 'checked': value})
            assert node.to_html() == '<input type="checkbox" checked>'

    def test_false_attribute_omitted(self):
        """Test False drops the attribute."""
        node = VElement('button', {'disabled': False})
        assert node.to_html() == '<button></button>'
        assert 'disabled' not in node.attributes

    def test_attribute_value_escaped(self):
        """Test quotes and ampersands in attribute values are escaped."""
        node = VElement('a', {'title': 'Tom & "Jerry"'})
        assert node.to_html() == '<a title="Tom &amp; &quot;Jerry&quot;"></a>'

    def test_single_quote_kept_in_attribute(self):
        """Test single quotes need no escaping in double-quoted values."""
        assert VElement('a', {'title': "it's"}).to_html() == '<a title="it\'s"></a>'

    def test_attributes_read_only(self):
        """Test the attribute view cannot be mutated."""
        node = VElement('div', {'id': 'x'})
        with pytest.raises(TypeError):
            node.attributes['id'] = 'y'

    def test_input_mapping_is_copied(self):
        """Test later changes to the source dict do not leak in."""
        source = {'id': 'x'}
        node = VElement('div', source)
        source['id'] = 'y'
        assert node.id == 'x'

    @pytest.mark.parametrize('tag', ['', ' ', 'di v', '1div', 'div!', '-x', 'div\n', None, 5])
    def test_invalid_tag_name(self, tag):
        """Test malformed tag names are rejected at construction."""
        with pytest.raises(InvalidTagNameError):
            VElement(tag)

    def test_custom_element_name(self):
        """Test hyphenated custom element names are accepted."""
        assert VElement('my-widget').to_html() == '<my-widget></my-widget>'

    @pytest.mark.parametrize('name', ['', 'on click', 'a"b', "a'b", 'a>b', 'a=b', 'a/b', 'onclick\n'])
    def test_invalid_attribute_name(self, name):
        """Test malformed attribute names are rejected at construction."""
        with pytest.raises(InvalidAttributeNameError):
            VElement('div', {name: 'x'})

    def test_attribute_validation_can_be_disabled(self):
        """Test a lenient schema trusts non-empty attribute names."""
        schema = HtmlSchema(validate_attributes=False)
        node = VElement('div', {'a b': '1'}, schema=schema)
        assert node.attributes == {'a b': '1'}

    def test_id_property(self):
        """Test id returns the id attribute or None."""
        assert VElement('div', {'id': 'main'}).id == 'main'
        assert VElement('div').id is None

    def test_with_attribute_returns_copy(self):
        """Test with_attribute leaves the original untouched."""
        node = VElement('div', {'class': 'a'})
        updated = node.with_attribute('class', 'b')
        assert node.to_html() == '<div class="a"></div>'
        assert updated.to_html() == '<div class="b"></div>'

    def test_with_child_returns_copy(self):
        """Test with_child appends to a new node."""
        node = VElement('ul')
        updated = node.with_child(VElement('li'))
        assert node.children == ()
        assert updated.to_html() == '<ul><li></li></ul>'

    def test_copies_keep_schema(self):
        """Test with_attribute and with_child reuse the node's schema."""
        lenient = HtmlSchema(validate_attributes=False)
        node = VElement('div', {'a b': '1'}, schema=lenient)
        assert node.with_attribute('c d', '2').attributes == {'a b': '1', 'c d': '2'}

        no_void = HtmlSchema(void_elements=())
        img = VElement('img', schema=no_void)
        assert img.with_child(VText('x')).to_html() == '<img>x</img>'

    def test_copies_keep_void_override(self):
        """Test a forced void flag survives with_attribute."""
        node = VElement('custom-el', void=True).with_attribute('id', 'i')
        assert node.to_html() == '<custom-el id="i">'

    def test_equality(self):
        """Test structural equality takes attribute order into account."""
        a = VElement('p', {'a': '1', 'b': '2'}, [VText('x')])
        assert a == VElement('p', {'a': '1', 'b': '2'}, [VText('x')])
        assert a != VElement('p', {'b': '2', 'a': '1'}, [VText('x')])
        assert hash(a) == hash(VElement('p', {'a': '1', 'b': '2'}, [VText('x')]))

    def test_idempotent_serialization(self):
        """Test serializing twice gives identical output."""
        node = VElement('div', {'class': 'x'}, [VText('a & b'), VRaw('<i>')])
        assert serialize(node) == serialize(node)


class TestVoidElements:
    """Tests for void element handling."""

    def test_void_has_no_closing_tag(self):
        """Test void elements emit only the start tag."""
        assert VElement('img', {'src': 'x.png'}).to_html() == '<img src="x.png">'
        assert VElement('br').to_html() == '<br>'

    def test_children_dropped_with_warning(self, caplog):
        """Test children of a void element are dropped in lenient mode."""
        with caplog.at_level(logging.WARNING, logger='genro_vdom.node'):
            node = VElement('img', {'src': 'x.png'}, [VText('ignored')])
        assert node.children == ()
        assert node.to_html() == '<img src="x.png">'
        assert 'void element <img>' in caplog.text

    def test_children_rejected_in_strict_mode(self):
        """Test strict mode raises for children on void elements."""
        with pytest.raises(VoidElementError):
            VElement('br', children=[VText('x')], strict=True)

    def test_with_child_on_void_raises(self):
        """Test with_child refuses void elements."""
        with pytest.raises(VoidElementError):
            VElement('hr').with_child(VText('x'))

    def test_configurable_void_set(self):
        """Test a schema can declare its own void elements."""
        schema = HtmlSchema(void_elements={'x-icon'})
        assert VElement('x-icon', schema=schema).to_html() == '<x-icon>'
        assert VElement('img', schema=schema).to_html() == '<img></img>'

    def test_void_override(self):
        """Test the void flag can be forced per node."""
        assert VElement('custom-el', void=True).to_html() == '<custom-el>'


class TestEscapeHelpers:
    """Tests for the escape functions."""

    def test_escape_text(self):
        """Test text escaping covers quotes."""
        assert escape_text('"\'') == '&quot;&#x27;'

    def test_escape_attribute(self):
        """Test attribute escaping."""
        assert escape_attribute('<"&>') == '&lt;&quot;&amp;&gt;'

    def test_render_document(self):
        """Test the doctype is prepended."""
        assert render_document(VElement('html')) == '<!DOCTYPE html><html></html>'


class TestWalk:
    """Tests for walk()."""

    def test_walk_depth_first(self):
        """Test nodes are yielded depth-first with their depth."""
        tree = VElement('ul', children=[
            VElement('li', children=[VText('a')]),
            VFragment([VText('b')]),
        ])
        result = [(depth, type(node).__name__) for depth, node in walk(tree)]
        assert result == [
            (0, 'VElement'),
            (1, 'VElement'),
            (2, 'VText'),
            (1, 'VFragment'),
            (2, 'VText'),
        ]

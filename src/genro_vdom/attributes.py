# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute carriers: Attr, Attributes and InlineStyle.

These are the items the variadic factories recognize as attributes
rather than children:

- Attr: a single name/value pair, e.g. ``class_('card')``
- Attributes: a fluent, ordered collection, e.g.
  ``attrs().id('main').class_('card')``
- InlineStyle: a CSS declaration block contributing the ``style``
  attribute, e.g. ``inline_style(display='flex', gap='1rem')``

Plain mappings passed positionally are attribute collections too.

Example:
    >>> from genro_vdom.elements import div
    >>> div(class_('card'), attrs().data('id', 7), 'Hi').to_html()
    '<div class="card" data-id="7">Hi</div>'
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping


def attribute_name(key: str) -> str:
    """Turn a Python keyword argument name into an HTML attribute name.

    One trailing underscore is removed (``class_`` -> ``class``) and the
    remaining underscores become hyphens (``data_id`` -> ``data-id``).
    """
    if key.endswith('_') and len(key) > 1:
        key = key[:-1]
    return key.replace('_', '-')


def css_property(key: str) -> str:
    """Turn a snake_case keyword into a CSS property name."""
    if key.startswith('--'):
        return key
    return key.rstrip('_').replace('_', '-')


class Attr:
    """A single HTML attribute.

    A value of None marks a boolean attribute (rendered as a bare name).
    """

    __slots__ = ('_name', '_value')

    def __init__(self, name: str, value: Any = None) -> None:
        self._name = name
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    def to_dict(self) -> dict[str, Any]:
        return {self._name: self._value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return (self._name, self._value) == (other._name, other._value)

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __repr__(self) -> str:
        return f"Attr({self._name!r}, {self._value!r})"


class InlineStyle:
    """An inline CSS declaration block.

    Property names given as keywords are converted from snake_case to
    kebab-case; custom properties (``--accent``) are kept as is.

    Example:
        >>> InlineStyle(display='flex', justify_content='center').to_css()
        'display: flex; justify-content: center;'
    """

    __slots__ = ('_properties',)

    def __init__(self, _properties: Mapping[str, Any] | None = None, **props: Any) -> None:
        self._properties: dict[str, str] = {}
        if _properties:
            for key, value in _properties.items():
                self.set(key, value)
        for key, value in props.items():
            self.set(css_property(key), value)

    def set(self, prop: str, value: Any) -> InlineStyle:
        """Set one CSS property. None removes it."""
        if value is None:
            self._properties.pop(prop, None)
        else:
            self._properties[prop] = str(value)
        return self

    def update(self, **props: Any) -> InlineStyle:
        """Set several properties from keywords."""
        for key, value in props.items():
            self.set(css_property(key), value)
        return self

    @property
    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    def to_css(self) -> str:
        """Render the declarations as ``prop: value;`` pairs."""
        return ' '.join(f"{k}: {v};" for k, v in self._properties.items())

    def to_dict(self) -> dict[str, Any]:
        """Attribute contribution: a single ``style`` entry."""
        return {'style': self.to_css()} if self._properties else {}

    def __bool__(self) -> bool:
        return bool(self._properties)

    def __repr__(self) -> str:
        return f"InlineStyle({self.to_css()!r})"


class Attributes:
    """Fluent, insertion-ordered attribute collection.

    Every setter returns self so calls can be chained. Setting a name a
    second time overwrites the earlier value in place.

    Example:
        >>> a = attrs().class_('btn').add_class('primary').disabled()
        >>> a.to_dict()
        {'class': 'btn primary', 'disabled': None}
    """

    __slots__ = ('_attributes',)

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._attributes: dict[str, Any] = dict(initial) if initial else {}

    def __repr__(self) -> str:
        return f"Attributes({self._attributes!r})"

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, name: str) -> bool:
        return name in self._attributes

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(self._attributes.items())

    def get(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the attributes as a dict."""
        return dict(self._attributes)

    # ==================== Core ====================

    def set(self, name: str, value: Any = None) -> Attributes:
        """Set an attribute. None marks a boolean attribute."""
        self._attributes[name] = value
        return self

    def update(self, _attr: Mapping[str, Any] | None = None, **kwargs: Any) -> Attributes:
        """Set several attributes from a mapping and/or keywords.

        Keyword names go through :func:`attribute_name`.
        """
        if _attr:
            self._attributes.update(_attr)
        for key, value in kwargs.items():
            self._attributes[attribute_name(key)] = value
        return self

    def remove(self, name: str) -> Attributes:
        self._attributes.pop(name, None)
        return self

    def id(self, value: str) -> Attributes:
        return self.set('id', value)

    def class_(self, value: str) -> Attributes:
        return self.set('class', value)

    def add_class(self, class_name: str) -> Attributes:
        """Append a class to the existing class list."""
        existing = self._attributes.get('class')
        if not existing or not str(existing).strip():
            return self.set('class', class_name)
        return self.set('class', f"{existing} {class_name}")

    def classes(self, *class_names: str) -> Attributes:
        """Set the class attribute from several names; empty names are skipped."""
        names = [n for n in class_names if n]
        if not names:
            return self
        return self.set('class', ' '.join(names))

    def class_if(self, class_name: str, condition: bool) -> Attributes:
        """Add a class only when condition is true."""
        return self.add_class(class_name) if condition else self

    def class_toggle(self, condition: bool, true_class: str, false_class: str) -> Attributes:
        return self.add_class(true_class if condition else false_class)

    def style(self, value: str | InlineStyle | None = None, **props: Any) -> Attributes:
        """Set the style attribute from a string, an InlineStyle or keywords.

        Example:
            >>> attrs().style(display='flex', gap='1rem').get('style')
            'display: flex; gap: 1rem;'
        """
        if isinstance(value, InlineStyle):
            value = value.to_css()
        if props:
            css = InlineStyle(**props).to_css()
            value = f"{value} {css}" if value else css
        return self.set('style', value or '')

    # ==================== Common attributes ====================

    def title(self, value: str) -> Attributes:
        return self.set('title', value)

    def href(self, value: str) -> Attributes:
        return self.set('href', value)

    def src(self, value: str) -> Attributes:
        return self.set('src', value)

    def alt(self, value: str) -> Attributes:
        return self.set('alt', value)

    def type(self, value: str) -> Attributes:
        return self.set('type', value)

    def name(self, value: str) -> Attributes:
        return self.set('name', value)

    def value(self, value: Any) -> Attributes:
        return self.set('value', value)

    def placeholder(self, value: str) -> Attributes:
        return self.set('placeholder', value)

    def action(self, value: str) -> Attributes:
        return self.set('action', value)

    def method(self, value: str) -> Attributes:
        return self.set('method', value)

    def target(self, value: str) -> Attributes:
        return self.set('target', value)

    def for_(self, value: str) -> Attributes:
        return self.set('for', value)

    def role(self, value: str) -> Attributes:
        return self.set('role', value)

    def data(self, name: str, value: Any) -> Attributes:
        return self.set(f"data-{name}", value)

    def aria(self, name: str, value: Any) -> Attributes:
        return self.set(f"aria-{name}", value)

    # ==================== Boolean attributes ====================

    def _flag(self, name: str, on: bool) -> Attributes:
        if on:
            return self.set(name, None)
        return self.remove(name)

    def disabled(self, on: bool = True) -> Attributes:
        return self._flag('disabled', on)

    def checked(self, on: bool = True) -> Attributes:
        return self._flag('checked', on)

    def required(self, on: bool = True) -> Attributes:
        return self._flag('required', on)

    def readonly(self, on: bool = True) -> Attributes:
        return self._flag('readonly', on)

    def hidden(self, on: bool = True) -> Attributes:
        return self._flag('hidden', on)

    def autofocus(self, on: bool = True) -> Attributes:
        return self._flag('autofocus', on)


# ==================== Factories ====================

def attrs(_attr: Mapping[str, Any] | None = None, **kwargs: Any) -> Attributes:
    """Start an Attributes builder, optionally pre-filled."""
    return Attributes().update(_attr, **kwargs)


def inline_style(_properties: Mapping[str, Any] | None = None, **props: Any) -> InlineStyle:
    """Start an InlineStyle from CSS properties."""
    return InlineStyle(_properties, **props)


def attr(name: str, value: Any = None) -> Attr:
    return Attr(name, value)


def id_(value: str) -> Attr:
    return Attr('id', value)


def class_(value: str) -> Attr:
    return Attr('class', value)


def style_(value: str | InlineStyle) -> Attr:
    if isinstance(value, InlineStyle):
        value = value.to_css()
    return Attr('style', value)


def href(value: str) -> Attr:
    return Attr('href', value)


def src(value: str) -> Attr:
    return Attr('src', value)


def alt(value: str) -> Attr:
    return Attr('alt', value)


def type_(value: str) -> Attr:
    return Attr('type', value)


def name(value: str) -> Attr:
    return Attr('name', value)


def value(value: Any) -> Attr:
    return Attr('value', value)


def placeholder(value: str) -> Attr:
    return Attr('placeholder', value)


def action(value: str) -> Attr:
    return Attr('action', value)


def method(value: str) -> Attr:
    return Attr('method', value)


def target(value: str) -> Attr:
    return Attr('target', value)


def title_(value: str) -> Attr:
    return Attr('title', value)


def for_(value: str) -> Attr:
    return Attr('for', value)


def role(value: str) -> Attr:
    return Attr('role', value)


def data(name: str, value: Any) -> Attr:
    return Attr(f"data-{name}", value)


def aria(name: str, value: Any) -> Attr:
    return Attr(f"aria-{name}", value)


def disabled() -> Attr:
    return Attr('disabled')


def checked() -> Attr:
    return Attr('checked')


def required() -> Attr:
    return Attr('required')


def readonly() -> Attr:
    return Attr('readonly')


def hidden() -> Attr:
    return Attr('hidden')


def autofocus() -> Attr:
    return Attr('autofocus')

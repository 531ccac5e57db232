# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Declarative iteration and conditional helpers.

All helpers return Elements (VNodes or builders), so their results can
be used anywhere a child is accepted. "Nothing" is always an empty
fragment, never None.

Lazy vs eager:
    Helpers take either a ready element or a supplier (a zero-argument
    callable). A supplier runs only when its branch is taken. A ready
    element has already been built by the caller, taken or not, so
    prefer suppliers for branches that are expensive or have side
    effects::

        when(user.is_admin, lambda: admin_panel(user))   # built only if admin
        when(user.is_admin, admin_panel(user))           # always built

Example:
    >>> from genro_vdom.elements import li, p, ul
    >>> ul(each(['a', 'b'], li)).to_html()
    '<ul><li>a</li><li>b</li></ul>'
    >>> when(False).elif_(True, lambda: p('second')).otherwise(p('none')).to_html()
    '<p>second</p>'
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from .element import Element
from .node import VFragment, VNode
from .tag import partition, to_vnode

_T = TypeVar('_T')

Supplier = Callable[[], Any]

_MISSING = object()


def _resolve(element: Supplier | Any) -> Any:
    """Call a supplier, or return a ready element unchanged."""
    return element() if callable(element) else element


def empty() -> VFragment:
    """An empty fragment: renders as nothing."""
    return VFragment()


def fragment(*items: Any) -> VFragment:
    """Group children without a wrapping tag.

    Items follow the factory rules: None is skipped, iterables are
    flattened. Attribute carriers have no element to attach to and are
    ignored.

    Example:
        >>> fragment('a', ['b', None], 'c').to_html()
        'abc'
    """
    _, children = partition(items)
    return VFragment(children)


def each(items: Iterable[_T], mapper: Callable[[_T], Any]) -> VFragment:
    """Map items to elements, in order.

    The mapping runs immediately: the result is a snapshot of items at
    call time, not a deferred generator. None results are skipped; an
    empty input yields an empty fragment.
    """
    nodes: list[VNode] = []
    for item in items:
        element = mapper(item)
        if element is not None:
            nodes.append(to_vnode(element))
    return VFragment(nodes)


class Condition(Element):
    """Builder for if/elif/else chains.

    States are unmatched and matched; the chain starts matched when the
    seed condition is true and never goes back. Once a branch is taken,
    later elif_() calls neither evaluate their condition (when it is a
    callable) nor their supplier.

    A chain is itself an Element: used as a child without otherwise()
    or end(), it renders like end().

    Example:
        >>> (when(is_admin)
        ...     .then(lambda: admin_panel())
        ...     .elif_(is_moderator, lambda: mod_panel())
        ...     .otherwise(lambda: login_prompt()))

    Note:
        A chain seeded with a true condition but without a then() has a
        matched state and no result; otherwise() then returns the
        fallback and end() an empty fragment.
    """

    __slots__ = ('_matched', '_result')

    def __init__(self, condition: bool | Callable[[], bool]) -> None:
        self._matched = bool(_resolve(condition))
        self._result: Any = None

    @property
    def matched(self) -> bool:
        return self._matched

    def then(self, element: Supplier | Any) -> Condition:
        """Element (or supplier) for the seed condition."""
        if self._matched and self._result is None:
            self._result = _resolve(element)
        return self

    def elif_(self, condition: bool | Callable[[], bool], element: Supplier | Any) -> Condition:
        """Else-if branch; a no-op once any branch has matched.

        Both condition and element may be callables; they are evaluated
        only while the chain is unmatched.
        """
        if self._matched or self._result is not None:
            return self
        if _resolve(condition):
            self._matched = True
            self._result = _resolve(element)
        return self

    def otherwise(self, element: Supplier | Any) -> Any:
        """Terminate with a fallback: the matched element or element."""
        if self._result is not None:
            return self._result
        return _resolve(element)

    def end(self) -> Any:
        """Terminate without fallback: the matched element or nothing."""
        if self._result is not None:
            return self._result
        return empty()

    def to_vnode(self) -> VNode:
        """An unterminated chain renders like end()."""
        return to_vnode(self.end())

    def __repr__(self) -> str:
        return f"Condition(matched={self._matched})"


def when(condition: bool | Callable[[], bool], element: Any = _MISSING) -> Any:
    """Conditional rendering.

    - ``when(cond)`` starts a :class:`Condition` chain.
    - ``when(cond, supplier)`` calls supplier only if cond is true.
    - ``when(cond, element)`` returns element if cond is true (eager:
      element was built anyway).

    A false condition, or a None element, yields an empty fragment.
    """
    if element is _MISSING:
        return Condition(condition)
    if _resolve(condition):
        result = _resolve(element)
        return empty() if result is None else result
    return empty()


def unless(condition: bool, element: Supplier | Any) -> Any:
    """Inverse of :func:`when` with an element."""
    return when(not condition, element)


def if_else(condition: bool, if_true: Supplier | Any, if_false: Supplier | Any) -> Any:
    """Exactly one of two branches; suppliers are called lazily."""
    result = _resolve(if_true) if condition else _resolve(if_false)
    return empty() if result is None else result


class CondCase:
    """A (matches, element) pair for :func:`match`."""

    __slots__ = ('_matches', '_element')

    def __init__(self, matches: bool, element: Any) -> None:
        self._matches = bool(matches)
        self._element = element

    @property
    def matches(self) -> bool:
        return self._matches

    @property
    def element(self) -> Any:
        return self._element

    def __repr__(self) -> str:
        return f"CondCase(matches={self._matches}, element={self._element!r})"


def cond(condition: bool, element: Supplier | Any) -> CondCase:
    """A match case.

    A supplier is called right away, but only if condition is true.
    """
    return CondCase(condition, _resolve(element) if condition else None)


def otherwise(element: Supplier | Any) -> CondCase:
    """The always-matching case, for the end of a match().

    Unlike cond(), a supplier given here is always called, when the
    case is built, because this case always matches.
    """
    return CondCase(True, _resolve(element))


def match(*cases: CondCase) -> Any:
    """Pattern-matching style conditional: first matching case wins.

    Example:
        >>> match(
        ...     cond(is_admin, lambda: admin_panel()),
        ...     cond(is_user, lambda: user_panel()),
        ...     otherwise(lambda: login_prompt()),
        ... )

    Returns:
        The first matching case's element, or an empty fragment.
    """
    for case in cases:
        if case.matches:
            return empty() if case.element is None else case.element
    return empty()

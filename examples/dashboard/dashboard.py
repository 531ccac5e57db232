# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dashboard - Example page built with the element factories.

A didactic example showing lists, conditionals, match and an error
boundary composed into one HtmlPage.
"""

from __future__ import annotations

from genro_vdom import (
    HtmlPage,
    class_,
    cond,
    each,
    error_boundary,
    inline_style,
    match,
    otherwise,
    when,
)
from genro_vdom.elements import a, div, h1, h3, li, meta, nav, p, section, span, ul


class Dashboard:
    """A user dashboard page.

    This is the "cover" class that wraps an HtmlPage and provides a
    convenient API.

    Example:
        >>> board = Dashboard(user='Alice', role='admin')
        >>> board.add_card('Orders', ['#1001', '#1002'])
        >>> board.add_card('Alerts', [])
        >>> html = board.to_html()
    """

    def __init__(self, user: str, role: str = 'guest'):
        self.user = user
        self.role = role
        self.cards: list[tuple[str, list[str]]] = []
        self._page = HtmlPage(title=f"{user} - Dashboard", lang='en')
        self._page.head.child(meta(charset='utf-8'))
        self._built = False

    def add_card(self, title: str, items: list[str]) -> None:
        self.cards.append((title, items))

    def card(self, title: str, items: list[str]):
        return div(
            class_('card'),
            h3(title),
            when(bool(items))
            .then(lambda: ul(each(items, li)))
            .otherwise(lambda: p(class_('muted'), 'Nothing here yet')),
        )

    def menu(self):
        return nav(
            a('Home', href='/'),
            match(
                cond(self.role == 'admin', lambda: a('Admin', href='/admin')),
                cond(self.role == 'editor', lambda: a('Editor', href='/edit')),
                otherwise(span('Guest')),
            ),
        )

    def build(self) -> HtmlPage:
        """Fill the page body; the page is built once."""
        if self._built:
            return self._page
        self._built = True
        self._page.body.children(
            self.menu(),
            h1(f"Welcome, {self.user}"),
            section(
                inline_style(display='grid', gap='1rem'),
                [error_boundary(lambda c=c: self.card(*c), p('Card unavailable'))
                 for c in self.cards],
            ),
        )
        return self._page

    def to_html(self, filename: str | None = None, output_dir: str | None = None) -> str:
        return self.build().to_html(filename=filename, output_dir=output_dir)


if __name__ == '__main__':
    board = Dashboard(user='Alice', role='admin')
    board.add_card('Orders', ['#1001', '#1002'])
    board.add_card('Alerts', [])
    print(board.to_html())
    board.build().print_tree()

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ErrorBoundary - render a fallback when building content fails.

Example:
    >>> div(
    ...     error_boundary(lambda: risky_widget(), lambda e: p(f"Failed: {e}")),
    ...     try_render(lambda: optional_widget()),
    ... )
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .element import Element
from .node import VFragment, VNode, VText
from .tag import to_vnode

logger = logging.getLogger(__name__)


class ErrorBoundary(Element):
    """Wraps a content supplier and catches errors raised while building it.

    The supplier runs each time the boundary is rendered. On an
    exception the error is logged, passed to the on_error handler (if
    any) and replaced by the fallback. The default fallback renders
    nothing.
    """

    __slots__ = ('_content', '_fallback', '_error_handler')

    def __init__(self, content: Callable[[], Any]) -> None:
        self._content = content
        self._fallback: Callable[[Exception], Any] = lambda error: VFragment()
        self._error_handler: Callable[[Exception], None] | None = None

    def fallback(self, fallback: Callable[[Exception], Any] | Any) -> ErrorBoundary:
        """Set the fallback: a function of the error, or a static element."""
        if callable(fallback):
            self._fallback = fallback
        else:
            self._fallback = lambda error: fallback
        return self

    def on_error(self, handler: Callable[[Exception], None]) -> ErrorBoundary:
        """Set a handler called with the error before the fallback is built."""
        self._error_handler = handler
        return self

    def render(self) -> Any:
        """Build the content, or the fallback if building raised."""
        try:
            return to_vnode(self._content())
        except Exception as error:
            logger.exception("Error boundary caught a render failure")
            if self._error_handler is not None:
                try:
                    self._error_handler(error)
                except Exception:
                    logger.exception("Error boundary handler failed")
            return self._fallback(error)

    def to_vnode(self) -> VNode:
        return to_vnode(self.render())


def error_boundary(
    content: Callable[[], Any],
    fallback: Callable[[Exception], Any] | Any,
) -> ErrorBoundary:
    """Boundary with a fallback function or static fallback element."""
    return ErrorBoundary(content).fallback(fallback)


def try_render(content: Callable[[], Any]) -> ErrorBoundary:
    """Boundary that renders nothing on error."""
    return ErrorBoundary(content)


def with_message(content: Callable[[], Any], message: str) -> ErrorBoundary:
    """Boundary that renders message as text on error."""
    return ErrorBoundary(content).fallback(lambda error: VText(message))

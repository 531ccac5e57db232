# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""VDOM exceptions."""

from __future__ import annotations


class VdomError(Exception):
    """Base exception for genro-vdom errors."""

    pass


class ConfigurationError(VdomError):
    """Raised when a tree is built with invalid configuration.

    Construction errors are raised at the point of misuse, never
    deferred to serialization.
    """

    pass


class InvalidTagNameError(ConfigurationError):
    """Raised when a tag name is empty or contains invalid characters."""

    pass


class InvalidAttributeNameError(ConfigurationError):
    """Raised when an attribute name cannot be emitted as HTML."""

    pass


class DuplicateAttributeError(ConfigurationError):
    """Raised in strict mode when an attribute is set twice."""

    pass


class VoidElementError(ConfigurationError):
    """Raised in strict mode when children are given to a void element."""

    pass

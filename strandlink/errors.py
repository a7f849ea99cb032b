#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Exception hierarchy for StrandLink.

Every failure in the overlap pipeline is fatal: nothing is retried and no
partial graph is written. The CLI catches StrandLinkError, reports the
message and exits non-zero.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""


class StrandLinkError(Exception):
    """Base class for all StrandLink errors."""
    pass


class ConfigError(StrandLinkError):
    """Raised when the configuration is missing or invalid (e.g. bad k)."""
    pass


class LengthError(StrandLinkError):
    """Raised when a fragment is too short to have a k-1 terminal region."""
    pass


class AlphabetError(StrandLinkError):
    """Raised when nucleotide and colour-space fragments are mixed."""
    pass


class StateError(StrandLinkError):
    """Raised when a staged structure is used outside its lifecycle window."""
    pass


class DuplicateFragmentError(StrandLinkError):
    """Raised when the same fragment identifier is seen twice."""
    pass


__all__ = [
    "StrandLinkError",
    "ConfigError",
    "LengthError",
    "AlphabetError",
    "StateError",
    "DuplicateFragmentError",
]

# StrandLink v0.1.0
# Any usage is subject to this software's license.

"""
StrandLink v0.1.0

Configuration management for StrandLink.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .schema import (
    DEFAULT_CONFIG,
    apply_overrides,
    load_config,
    overlap_config_from,
    save_config_template,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "apply_overrides",
    "load_config",
    "overlap_config_from",
    "save_config_template",
    "validate_config",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Version information.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

__version__ = "0.1.0"

# StrandLink v0.1.0
# Any usage is subject to this software's license.

# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import canonicalize, compare, step

__all__ = ["canonicalize", "compare", "step"]

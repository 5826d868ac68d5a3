# SPDX-License-Identifier: MIT
"""Command line front end of the versiontheca library."""

__version__ = "0.1.0"

# SPDX-License-Identifier: MIT
"""CLI command implementations."""

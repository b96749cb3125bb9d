# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Configuration settings for field record lists.

Settings are frozen pydantic models following the package's Model base;
each list carries its own settings and hands them on to derived lists.
"""

from __future__ import annotations

from pydantic import Field

from ..primitives import Model


class FieldInfoListSettings(Model):
    """
    Configuration for field list behavior.

    Controls how strictly incoming records are checked and what the
    tabular projection contains.
    """

    # Validation controls
    validate_records: bool = Field(
        default=True,
        description="Reject records without a string `name` when they enter a mutable list",
    )

    # Output format
    include_display_string: bool = Field(
        default=True,
        description="Include the rendered display string as a `display` column in to_frame()",
    )

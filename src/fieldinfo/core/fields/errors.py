# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class ImmutableListError(TypeError):
    """Raised when a mutating operation is attempted on a read-only field list."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"FieldInfoList is immutable: cannot {operation}")

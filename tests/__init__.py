# fieldinfo Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
fieldinfo test suite.

Unit tests for the field record types and the list containers built on
them, organized to mirror the package layout.
"""

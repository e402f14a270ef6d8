# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
phidcf test suite.

This package contains tests for the DCF engine components, organized into
unit and integration test categories.
"""

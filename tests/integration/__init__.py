# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for phidcf components.

This package contains integration tests that run complete analyses through
the engine facade and verify how the components interact.
"""

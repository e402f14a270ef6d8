# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Engine error taxonomy.

Errors are local to the call that raises them; the engine instance stays
usable and callers may correct inputs and re-invoke.
"""


class DCFError(Exception):
    """Base class for all engine errors."""


class InvalidStateError(DCFError, RuntimeError):
    """Raised when an operation's precondition on engine state is not met."""


class DivisionError(DCFError, ZeroDivisionError):
    """Raised when a formula would divide by a zero-valued input."""

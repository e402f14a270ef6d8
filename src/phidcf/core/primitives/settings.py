# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import FloatBetween0And1Exclusive, PositiveFloat

GOLDEN_RATIO = 1.618033988749895


class DCFSettings(Model):
    """
    Configuration for a DCF engine instance.

    Fixed parameters established once and read by every component. Settings
    are frozen; derive a variant with ``model_copy(update={...})`` instead of
    mutating an existing instance.

    Usage Examples:
        # Default Shinjuku Tower case
        settings = DCFSettings()

        # Same engine, different project and a 10% hurdle
        settings = DCFSettings(project_name="Custom Project", discount_rate=0.10)
    """

    project_name: str = Field(
        default="Tokyo Expansion - Shinjuku Tower",
        description="Human-readable project identifier reported on every result.",
    )
    location: str = Field(
        default="Shinjuku, Tokyo", description="Location label for the asset."
    )
    phi_ratio: PositiveFloat = Field(
        default=GOLDEN_RATIO,
        description=(
            "Ratio constant used by the phi adjustment and the IRR hedge. "
            "Values above 1 dampen projected yield and lift the hedged IRR."
        ),
    )
    discount_rate: FloatBetween0And1Exclusive = Field(
        default=0.08, description="Annual discount rate for NPV, in [0, 1)."
    )

    @property
    def hedge_factor(self) -> float:
        """Inverse of the phi ratio (~0.618 for the golden ratio)."""
        return 1.0 / self.phi_ratio

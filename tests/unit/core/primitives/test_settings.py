# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from phidcf.core.primitives import (
    GOLDEN_RATIO,
    DCFSettings,
    RecommendationEnum,
    enum_to_string,
)


class TestDCFSettings:
    """Tests for engine configuration defaults and validation."""

    def test_defaults(self):
        settings = DCFSettings()

        assert settings.project_name == "Tokyo Expansion - Shinjuku Tower"
        assert settings.location == "Shinjuku, Tokyo"
        assert settings.phi_ratio == pytest.approx(1.618033988749895)
        assert settings.discount_rate == 0.08

    def test_hedge_factor_is_inverse_phi(self):
        settings = DCFSettings()
        assert settings.hedge_factor == pytest.approx(0.6180339887, rel=1e-9)
        assert settings.hedge_factor == pytest.approx(GOLDEN_RATIO - 1)

    def test_custom_values(self):
        settings = DCFSettings(
            project_name="Custom Project", phi_ratio=2.0, discount_rate=0.10
        )
        assert settings.project_name == "Custom Project"
        assert settings.hedge_factor == 0.5
        assert settings.discount_rate == 0.10

    def test_settings_are_frozen(self):
        settings = DCFSettings()
        with pytest.raises(ValidationError):
            settings.discount_rate = 0.2

    def test_model_copy_derives_variant(self):
        base = DCFSettings()
        variant = base.model_copy(update={"discount_rate": 0.12})

        assert variant.discount_rate == 0.12
        assert base.discount_rate == 0.08

    @pytest.mark.parametrize("phi_ratio", [0.0, -1.618])
    def test_rejects_non_positive_phi(self, phi_ratio):
        with pytest.raises(ValidationError, match="greater than 0"):
            DCFSettings(phi_ratio=phi_ratio)

    @pytest.mark.parametrize("discount_rate", [-0.01, 1.0, 1.5])
    def test_rejects_discount_rate_outside_unit_interval(self, discount_rate):
        with pytest.raises(ValidationError):
            DCFSettings(discount_rate=discount_rate)

    def test_zero_discount_rate_allowed(self):
        assert DCFSettings(discount_rate=0.0).discount_rate == 0.0

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            DCFSettings(hurdle_rate=0.1)


def test_enum_to_string():
    assert enum_to_string(RecommendationEnum.STRONG_BUY) == "Strong Buy"
    assert enum_to_string("already_string") == "already_string"

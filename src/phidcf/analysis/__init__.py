# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Comprehensive DCF analysis: synthesis, verdict and the engine facade.
"""

from .api import analyze
from .engine import DCFEngine
from .results import (
    ComprehensiveResult,
    DCFAnalysis,
    EngineState,
    NPVResult,
    OverallAssessment,
)
from .synthesizer import DCFSynthesizer, assess

__all__ = [
    "analyze",
    "assess",
    "ComprehensiveResult",
    "DCFAnalysis",
    "DCFEngine",
    "DCFSynthesizer",
    "EngineState",
    "NPVResult",
    "OverallAssessment",
]

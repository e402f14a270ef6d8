# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveFloat = Annotated[float, Field(gt=0)]
FloatBetween0And1Exclusive = Annotated[float, Field(ge=0, lt=1)]

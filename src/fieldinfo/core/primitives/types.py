# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]

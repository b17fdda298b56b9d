"""Compression parameters."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal


class QuantScaling(Enum):
    """How the distortion factor scales the base quantization table."""

    LINEAR = 'linear'      # scale = 1 + 20 * factor
    QUALITY = 'quality'    # IJG quality curve on quality = 100 * (1 - factor)


class BlockPadding(Enum):
    """How blocks that overrun the plane are filled."""

    EDGE = 'edge'
    ZERO = 'zero'


def clamp_factor(factor: float) -> float:
    """Clamp a distortion factor into [0, 1]. NaN maps to 0 (passthrough)."""
    factor = float(factor)
    if math.isnan(factor):
        return 0.0
    return min(max(factor, 0.0), 1.0)


@dataclass
class CompressionParams:
    """JPEG-like distortion parameters."""

    factor: float = 0.5
    scaling: QuantScaling = QuantScaling.LINEAR
    padding: BlockPadding = BlockPadding.EDGE
    subsampling_mode: Literal['4:4:4', '4:2:2', '4:2:0'] = '4:2:0'
    use_prefilter: bool = False
    level_shift: bool = True

    def __post_init__(self):
        # Out-of-range factors are a visual setting, not an error
        self.factor = clamp_factor(self.factor)
        if self.subsampling_mode not in ('4:4:4', '4:2:2', '4:2:0'):
            raise ValueError(f"Unknown subsampling mode: {self.subsampling_mode}")
        self.scaling = QuantScaling(self.scaling)
        self.padding = BlockPadding(self.padding)

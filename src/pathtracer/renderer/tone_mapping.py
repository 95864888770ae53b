# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

def reinhard_tone_mapping(accumulated: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0) -> np.ndarray:
    """
    Compress a linear radiance image into [0, 1) with the Reinhard operator.
    Gamma is left to to_bytes().
    """
    scaled = accumulated * exposure
    return scaled / (1.0 + scaled / white_point)

@njit(cache=False)
def _quantize_kernel(pixels, inv_gamma):
    height, width, channels = pixels.shape
    output = np.zeros((height, width, channels), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = pixels[y, x, c]
                # NaN and non-positive radiance both end up as 0
                if math.isnan(value) or value <= 0.0:
                    continue
                if inv_gamma != 1.0:
                    value = value ** inv_gamma
                if value > 0.999:
                    value = 0.999
                output[y, x, c] = int(256.0 * value)
    return output

def to_bytes(pixels: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Convert averaged linear colors (height, width, 3) into 0-255 channel
    values: gamma-correct with power 1/gamma, clamp to [0, 0.999] and scale
    by 256. gamma=1.0 leaves the values linear.
    """
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    pixels = np.ascontiguousarray(pixels, dtype=np.float64)
    return _quantize_kernel(pixels, 1.0 / gamma)

# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

def gamma_correct(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Average summed samples, apply gamma 2 (square root) and quantise to 8 bits.

    Args:
        accumulated: (height, width, 3) linear RGB sums.
        samples: Number of samples summed into each pixel.

    Returns:
        (height, width, 3) uint8 image.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    out = np.empty(accumulated.shape, dtype=np.uint8)
    _gamma_kernel(np.ascontiguousarray(accumulated, dtype=np.float64), 1.0 / samples, out)
    return out

def reinhard_tone_mapping(accumulated: np.ndarray, samples: int, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.0) -> np.ndarray:
    """
    Apply Reinhard tone mapping to summed linear radiance, for scenes with
    bright emitters that would otherwise clip.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    scaled = accumulated / samples * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = np.maximum(mapped, 0.0) ** (1.0 / gamma)
    return (mapped * 256).clip(0, 255).astype(np.uint8)

@njit(cache=True)
def _gamma_kernel(linear_image, scale, output_image):
    h, w, c = linear_image.shape
    for y in range(h):
        for x in range(w):
            for k in range(c):
                v = linear_image[y, x, k] * scale
                # NaN samples are mapped to black rather than poisoning the cast
                if not v > 0.0:
                    v = 0.0
                v = math.sqrt(v)
                if v > 0.9999:
                    v = 0.9999
                output_image[y, x, k] = int(256.0 * v)

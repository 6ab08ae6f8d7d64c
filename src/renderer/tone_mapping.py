# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit(cache=True)
def gamma_quantize_kernel(linear_image, output_image):
    """
    Gamma-2 (square root) tone curve followed by 8-bit quantization.
    """
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                if not value > 0.0:  # Negative or NaN
                    value = 0.0
                value = math.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = int(256.0 * value)

def gamma_correct_and_quantize(linear: np.ndarray) -> np.ndarray:
    """
    Convert a linear (height, width, 3) image to uint8 with gamma 2.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {linear.shape}")
    output = np.zeros(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, output)
    return output

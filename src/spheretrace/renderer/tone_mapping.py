# renderer/tone_mapping.py
import numpy as np

def quantize(image: np.ndarray) -> np.ndarray:
    """
    Convert gamma-space channel values in [0, 1] to 8-bit samples.

    The mapping truncates (``int(255 * c)``), so 0.5 becomes 127 and 1.0
    becomes 255. Anything outside [0, 1], NaN included, is a bug upstream.
    """
    image = np.asarray(image, dtype=np.float64)
    in_range = (image >= 0.0) & (image <= 1.0)
    if not np.all(in_range):
        bad = image[~in_range][0]
        raise ValueError(f"Color channel out of range [0, 1]: {bad}")
    return (image * 255.0).astype(np.uint8)

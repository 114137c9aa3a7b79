# core/color.py
import math
from spheretrace.core.vector import Vector3

# Colors are plain Vector3 triples (r, g, b) in linear space unless noted.
Color = Vector3

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def lerp(start: Color, end: Color, t: float) -> Color:
    """Blend from `start` (t=0) to `end` (t=1)."""
    return start + (end - start) * t

def gamma_correct(color: Color) -> Color:
    """Map a linear color to gamma 2 space."""
    return Color(math.sqrt(color.x), math.sqrt(color.y), math.sqrt(color.z))

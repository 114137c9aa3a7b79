# camera/camera.py
from spheretrace.core.vector import Vector3
from spheretrace.core.ray import Ray

class Camera:
    """
    Axis-aligned pinhole camera looking down -z.

    Maps viewport coordinates (u, v) to world-space rays. (0, 0) is the lower
    left corner and (1, 1) the upper right; values outside that range are not
    clamped and extrapolate past the viewport edge.
    """
    def __init__(self, aspect_ratio: float, viewport_height: float = 2.0,
                 focal_length: float = 1.0, origin: Vector3 = None):
        self.aspect_ratio = aspect_ratio
        self.viewport_height = viewport_height
        self.viewport_width = aspect_ratio * viewport_height
        self.focal_length = focal_length

        self.origin = origin if origin is not None else Vector3(0, 0, 0)
        self.horizontal = Vector3(self.viewport_width, 0, 0)
        self.vertical = Vector3(0, viewport_height, 0)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  Vector3(0, 0, focal_length))

    def get_ray(self, u: float, v: float) -> Ray:
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)

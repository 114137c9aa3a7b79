# geometry/sphere.py
import math
from typing import Optional
from spheretrace.core.vector import Vector3
from spheretrace.core.ray import Ray
from spheretrace.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    A sphere defined by its center and radius. The radius is not validated.
    """
    def __init__(self, center: Vector3, radius: float):
        self.center = center
        self.radius = radius

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first; both must lie strictly inside the interval.
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord(t=root)
        rec.point = ray.at(root)
        outward_normal = (rec.point - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

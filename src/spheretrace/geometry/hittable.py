# geometry/hittable.py
from typing import Optional
from spheretrace.core.vector import Vector3
from spheretrace.core.ray import Ray

class HitRecord:
    """
    Records details of the nearest ray-object intersection found by one query.
    """
    def __init__(self, point: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True):
        self.point = point            # Intersection point
        self.normal = normal          # Unit normal, always opposing the ray
        self.t = t                    # Ray parameter at intersection
        self.front_face = front_face  # False when the ray started inside

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the stored normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(point={self.point!r}, normal={self.normal!r}, "
                f"t={self.t}, front_face={self.front_face})")

class Hittable:
    """
    Anything a ray can intersect. Implementations return the nearest hit with
    t strictly inside (t_min, t_max), or None.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

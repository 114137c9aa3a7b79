# core/utils.py
from spheretrace.core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside the unit sphere, drawn uniformly by rejection.

    `rng` is any source exposing ``uniform(a, b)`` (``random.Random`` or a
    numpy ``Generator``); callers own it so no state is shared between workers.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p

def random_in_hemisphere(normal: Vector3, rng) -> Vector3:
    """
    Returns a random point in the unit ball on the same side as `normal`.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere

# renderer/shading.py
import math
from spheretrace.core.color import BLACK, SKY_BLUE, WHITE, Color, lerp
from spheretrace.core.ray import Ray
from spheretrace.core.utils import random_in_hemisphere
from spheretrace.geometry.hittable import Hittable

# Bounced rays start this far along to avoid re-hitting their own surface.
T_MIN = 0.001
INFINITY = math.inf
ALBEDO = 0.5

def background_color(ray: Ray) -> Color:
    """
    Sky gradient: white looking straight down, sky blue looking straight up.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return lerp(WHITE, SKY_BLUE, t)

def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Color:
    """
    Estimate the light arriving along `ray`.

    Each hit scatters the ray into a random direction in the hemisphere around
    the surface normal and keeps half of what comes back; a miss returns the
    sky gradient. After `depth` bounces the path is absorbed (black).

    The bounce chain is walked iteratively, carrying the accumulated
    attenuation, which gives the same result as recursing `depth` levels
    without touching Python's recursion limit.
    """
    attenuation = 1.0
    while depth > 0:
        rec = world.hit(ray, T_MIN, INFINITY)
        if rec is None:
            return background_color(ray) * attenuation
        target = rec.point + random_in_hemisphere(rec.normal, rng)
        ray = Ray(rec.point, target - rec.point)
        attenuation *= ALBEDO
        depth -= 1
    return BLACK

# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from core.interval import Interval
from core.utils import ieee_divide
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    A negative radius flips the outward normal; it is not rejected.
    """
    def __init__(self, center: Point3, radius: float):
        self.center = center
        self.radius = radius

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = ieee_divide(-half_b - sqrtd, a)
        if not ray_t.surrounds(root):
            root = ieee_divide(-half_b + sqrtd, a)
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"

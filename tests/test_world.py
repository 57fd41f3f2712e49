import math

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList

FORWARD = Interval(0, math.inf)

RAYS = [
    Ray(Point3(0, 0, 0), Vector3(0, 0, -1)),
    Ray(Point3(0, 0, 0), Vector3(0.1, 0.05, -1)),
    Ray(Point3(0, 0, 0), Vector3(-0.2, 0.1, -1)),
    Ray(Point3(0.3, -0.2, 1), Vector3(-0.05, 0.02, -1)),
    Ray(Point3(0, 0, 0), Vector3(0, 1, 0)),
]


def overlapping_spheres():
    return [
        Sphere(Point3(0, 0, -6), 1.0),
        Sphere(Point3(0.2, 0.1, -3), 0.5),
        Sphere(Point3(-0.3, 0.2, -4), 1.2),
        Sphere(Point3(0, -100.5, -1), 100),
    ]


def test_empty_list_never_hits():
    world = HittableList()
    assert len(world) == 0
    for ray in RAYS:
        assert world.hit(ray, FORWARD) is None


@pytest.mark.parametrize("ray", RAYS)
def test_closest_hit_matches_independent_minimum(ray):
    spheres = overlapping_spheres()
    world = HittableList()
    for s in spheres:
        world.add(s)

    candidates = [rec for rec in (s.hit(ray, FORWARD) for s in spheres) if rec is not None]
    rec = world.hit(ray, FORWARD)
    if not candidates:
        assert rec is None
        return
    best = min(candidates, key=lambda r: r.t)
    assert rec is not None
    assert rec.t == best.t
    assert tuple(rec.p) == tuple(best.p)
    assert tuple(rec.normal) == tuple(best.normal)
    assert rec.front_face == best.front_face


def test_insertion_order_does_not_change_result():
    ray = RAYS[0]
    forward = HittableList()
    backward = HittableList()
    spheres = overlapping_spheres()
    for s in spheres:
        forward.add(s)
    for s in reversed(spheres):
        backward.add(s)
    assert forward.hit(ray, FORWARD).t == pytest.approx(backward.hit(ray, FORWARD).t)
    assert forward.hit(ray, FORWARD).t == pytest.approx(3.0 - math.sqrt(0.2))


def test_ray_aimed_away_misses_everything():
    world = HittableList()
    for s in overlapping_spheres():
        world.add(s)
    assert world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0.3, 1)), FORWARD) is None


def test_clear_behaves_like_new_list():
    world = HittableList()
    for s in overlapping_spheres():
        world.add(s)
    assert len(world) == 4
    world.clear()
    assert len(world) == 0
    for ray in RAYS:
        assert world.hit(ray, FORWARD) is None


def test_nested_lists_compose():
    inner = HittableList()
    inner.add(Sphere(Point3(0, 0, -3), 0.5))
    outer = HittableList()
    outer.add(Sphere(Point3(0, 0, -6), 1.0))
    outer.add(inner)
    rec = outer.hit(RAYS[0], FORWARD)
    assert rec.t == pytest.approx(2.5)


def test_base_hittable_is_abstract():
    with pytest.raises(NotImplementedError):
        Hittable().hit(RAYS[0], FORWARD)

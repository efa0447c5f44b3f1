"""Tests for world composition, shading and shadows."""

import pytest

from core.color import Color
from core.errors import SceneFrozenError
from core.matrix import Matrix
from core.ray import Ray
from core.vector import point, vector
from geometry.intersection import Intersection
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import World
from materials.light import PointLight
from materials.material import Material


class TestConstruction:
    def test_creating_a_world(self):
        w = World()
        assert w.light is None
        assert len(w) == 0
        assert w.objects == []

    def test_the_default_world(self, default_world):
        assert default_world.light == PointLight(point(-10, 10, -10), Color(1, 1, 1))
        s1, s2 = default_world.objects
        assert s1.material == Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        assert s2.transform == Matrix.scaling(0.5, 0.5, 0.5)
        assert default_world.contains(s1)
        assert default_world.contains(s2)
        assert not default_world.contains(Sphere())

    def test_add_returns_stable_handles(self):
        w = World()
        a = Sphere()
        b = Plane()
        assert w.add(a) == 0
        assert w.add(b) == 1
        assert w[0] is a
        assert w[1] is b

    def test_objects_is_a_copy(self, default_world):
        default_world.objects.append(Sphere())
        assert len(default_world) == 2


class TestFreeze:
    def test_freezing_locks_the_world_and_its_shapes(self, default_world):
        default_world.freeze()
        with pytest.raises(SceneFrozenError):
            default_world.add(Sphere())
        with pytest.raises(SceneFrozenError):
            default_world.light = None
        with pytest.raises(SceneFrozenError):
            default_world[0].transform = Matrix.translation(1, 0, 0)
        with pytest.raises(SceneFrozenError):
            default_world[1].material.ambient = 1

    def test_freeze_is_idempotent(self, default_world):
        assert default_world.freeze() is default_world
        assert default_world.freeze() is default_world
        assert default_world.frozen

    def test_freezing_locks_the_light(self, default_world):
        default_world.freeze()
        light = default_world.light
        assert light.frozen
        with pytest.raises(SceneFrozenError):
            light.position = point(10, 10, -10)
        with pytest.raises(SceneFrozenError):
            light.intensity = Color(0.5, 0.5, 0.5)
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert default_world.color_at(r) == Color(0.38066, 0.47583, 0.2855)

    def test_frozen_material_colors_cannot_change(self, default_world):
        default_world.freeze()
        with pytest.raises(AttributeError):
            default_world[0].material.color.red = 0.0
        with pytest.raises(AttributeError):
            default_world.light.intensity.red = 0.0
        assert default_world[0].material.color == Color(0.8, 1.0, 0.6)

    def test_a_frozen_world_still_renders(self, default_world):
        default_world.freeze()
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert default_world.color_at(r) == Color(0.38066, 0.47583, 0.2855)


class TestIntersect:
    def test_intersect_a_world_with_a_ray(self, default_world):
        xs = default_world.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4, 4.5, 5.5, 6])

    def test_intersect_an_empty_world(self):
        xs = World().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert len(xs) == 0


class TestShading:
    def test_shading_an_intersection(self, default_world):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Intersection(4, default_world[0]).prepare_computations(r)
        assert default_world.shade_hit(comps) == Color(0.38066, 0.47583, 0.2855)

    def test_shading_an_intersection_from_the_inside(self, default_world):
        default_world.light = PointLight(point(0, 0.25, 0), Color(1, 1, 1))
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Intersection(0.5, default_world[1]).prepare_computations(r)
        assert default_world.shade_hit(comps) == Color(0.90498, 0.90498, 0.90498)

    def test_shade_hit_is_given_an_intersection_in_shadow(self):
        w = World(PointLight(point(0, 0, -10), Color(1, 1, 1)))
        w.add(Sphere())
        s2 = Sphere(transform=Matrix.translation(0, 0, 10))
        w.add(s2)
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = Intersection(4, s2).prepare_computations(r)
        assert w.shade_hit(comps) == Color(0.1, 0.1, 0.1)

    def test_shade_hit_without_a_light_is_black(self):
        w = World()
        s = Sphere()
        w.add(s)
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Intersection(4, s).prepare_computations(r)
        assert w.shade_hit(comps) == Color.black()

    def test_the_color_when_a_ray_misses(self, default_world):
        assert default_world.color_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == Color(0, 0, 0)

    def test_the_color_when_a_ray_hits(self, default_world):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert default_world.color_at(r) == Color(0.38066, 0.47583, 0.2855)

    def test_the_color_with_an_intersection_behind_the_ray(self, default_world):
        outer, inner = default_world[0], default_world[1]
        outer.material.ambient = 1
        inner.material.ambient = 1
        r = Ray(point(0, 0, 0.75), vector(0, 0, -1))
        assert default_world.color_at(r) == inner.material.color


class TestShadows:
    def test_no_shadow_when_nothing_is_collinear_with_point_and_light(self, default_world):
        assert default_world.is_shadowed(point(0, 10, 0)) is False

    def test_shadow_when_an_object_is_between_the_point_and_the_light(self, default_world):
        assert default_world.is_shadowed(point(10, -10, 10)) is True

    def test_no_shadow_when_an_object_is_behind_the_light(self, default_world):
        assert default_world.is_shadowed(point(-20, 20, -20)) is False

    def test_no_shadow_when_an_object_is_behind_the_point(self, default_world):
        assert default_world.is_shadowed(point(-2, 2, -2)) is False

    def test_no_shadow_without_a_light(self):
        w = World()
        w.add(Sphere())
        assert w.is_shadowed(point(0, 0, -5)) is False

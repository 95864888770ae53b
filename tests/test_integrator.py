"""Unit tests for the recursive radiance estimator."""

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry import HittableList, Sphere, XYRect
from pathtracer.materials import DiffuseLight, Lambertian, Metal
from pathtracer.renderer.integrator import BLACK, SKY_BLUE, SKY_WHITE, background, ray_color

FORWARD = Vector3(0.0, 0.0, -1.0)


def lone_sphere(material):
    return HittableList([Sphere(Vector3(0.0, 0.0, -3.0), 1.0, material)])


class TestBackground:
    def test_gradient_endpoints(self):
        assert background(Ray(Vector3.zero(), Vector3(0.0, 1.0, 0.0))) == SKY_BLUE
        assert background(Ray(Vector3.zero(), Vector3(0.0, -1.0, 0.0))) == SKY_WHITE

    def test_horizon_is_halfway(self):
        color = background(Ray(Vector3.zero(), FORWARD))
        assert color.is_close(SKY_WHITE * 0.5 + SKY_BLUE * 0.5, 1e-12)


class TestRayColor:
    def test_miss_returns_background_exactly(self, rng):
        ray = Ray(Vector3.zero(), Vector3(0.3, 0.8, -0.1))
        assert ray_color(ray, HittableList(), 10, rng) == background(ray)

    def test_ray_missing_the_tree_returns_background(self, rng):
        world = HittableList([
            Sphere(Vector3(0.0, 0.0, -3.0), 1.0, Lambertian(Color(0.9, 0.9, 0.9))),
            Sphere(Vector3(2.0, 0.0, -4.0), 0.5, Metal(Color(0.8, 0.8, 0.8), 0.1)),
            XYRect(-1.0, 1.0, 2.0, 3.0, -5.0, DiffuseLight(Color(4.0, 4.0, 4.0))),
        ])
        root = world.build_bvh(0.0, 0.0, rng)
        for direction in (Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0),
                          Vector3(-1.0, 0.2, -0.1), Vector3(0.3, -1.0, 0.5)):
            ray = Ray(Vector3.zero(), direction)
            assert not root.box.hit(ray, 0.001, float("inf"))
            assert ray_color(ray, root, 10, rng) == background(ray)

    def test_background_override(self, rng):
        ray = Ray(Vector3.zero(), FORWARD)
        assert ray_color(ray, HittableList(), 10, rng, Color(0.1, 0.2, 0.3)) == Color(0.1, 0.2, 0.3)

    def test_depth_exhausted_is_black(self, rng):
        ray = Ray(Vector3.zero(), Vector3(0.0, 1.0, 0.0))
        assert ray_color(ray, HittableList(), 0, rng) == BLACK

    def test_light_returns_emission(self, rng):
        world = HittableList([XYRect(-1.0, 1.0, -1.0, 1.0, -2.0, DiffuseLight(Color(4.0, 3.0, 2.0)))])
        assert ray_color(Ray(Vector3.zero(), FORWARD), world, 5, rng) == Color(4.0, 3.0, 2.0)

    def test_last_bounce_contributes_nothing(self, rng):
        # With one bounce left the scattered ray hits the depth limit
        world = lone_sphere(Lambertian(Color(0.9, 0.9, 0.9)))
        assert ray_color(Ray(Vector3.zero(), FORWARD), world, 1, rng) == BLACK

    def test_mirror_multiplies_background_by_albedo(self, rng):
        world = lone_sphere(Metal(Color(0.5, 0.25, 1.0), 0.0))
        color = ray_color(Ray(Vector3.zero(), FORWARD), world, 5, rng)
        # Head-on reflection goes straight back out to the horizon
        expected = background(Ray(Vector3.zero(), Vector3(0.0, 0.0, 1.0))) * Color(0.5, 0.25, 1.0)
        assert color.is_close(expected, 1e-12)

    def test_values_are_non_negative(self, rng):
        world = HittableList([
            Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))),
            Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.7, 0.3, 0.3))),
        ])
        for _ in range(50):
            c = ray_color(Ray(Vector3.zero(), Vector3(rng.uniform(-0.5, 0.5), rng.uniform(-0.5, 0.5), -1.0)),
                          world, 8, rng)
            assert min(c.x, c.y, c.z) >= 0.0
            assert max(c.x, c.y, c.z) <= 1.0 + 1e-12

    def test_absorbed_path_is_black(self, rng):
        class Absorber(Lambertian):
            def scatter(self, ray_in, rec, rng):
                return None

        world = lone_sphere(Absorber(Color(1.0, 1.0, 1.0)))
        assert ray_color(Ray(Vector3.zero(), FORWARD), world, 5, rng) == BLACK

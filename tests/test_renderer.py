import math
import unittest

from sphere_cli_raycaster.math_utils import Vec3
from sphere_cli_raycaster.picture import Picture
from sphere_cli_raycaster.renderer import Renderer
from sphere_cli_raycaster.scene import Area, Scene, Sphere

CAMERA = Vec3(0.0, 0.0, -50.0)
FOCAL = 0.02


def make_scene() -> Scene:
    return Scene(Area(-40, 40, -20, 20, -20, 20), CAMERA, FOCAL)


class RendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = Renderer()
        self.scene = make_scene()
        self.picture = Picture(20, 40)

    def test_single_sphere_on_axis(self) -> None:
        self.scene.add(0, Sphere(Vec3(0.0, 0.0, 0.0), 8.0, 2), Vec3(0, 0, 0))
        self.renderer.render(self.scene, self.picture)

        painted = 0
        for i in range(self.picture.height):
            for j in range(self.picture.width):
                px = j - self.picture.width / 2.0
                py = i - self.picture.height / 2.0
                dx, dy = (CAMERA.x - px) * FOCAL, (CAMERA.y - py) * FOCAL
                norm = math.sqrt(dx * dx + dy * dy + 1.0)
                # Distance from the sphere center to the ray through this pixel
                tc = 50.0 * (1.0 / norm)
                d = math.sqrt(max(0.0, 2500.0 - tc * tc))
                expected = 2 if d <= 8.0 else 0
                self.assertEqual(self.picture.get(i, j), expected, (i, j))
                painted += expected == 2

        self.assertEqual(self.picture.get(10, 20), 2)
        self.assertEqual(self.picture.get(0, 0), 0)
        self.assertGreater(painted, 0)
        self.assertLess(painted, self.picture.height * self.picture.width)

    def test_render_is_repeatable(self) -> None:
        self.scene.add(0, Sphere(Vec3(0.0, 0.0, 0.0), 8.0, 1), Vec3(1, 1, 1))
        self.scene.add(4, Sphere(Vec3(12.0, 3.0, 10.0), 6.0, 3), Vec3(0, 0, 0))
        first = list(self.renderer.render(self.scene, self.picture).pixels)
        second = list(self.renderer.render(self.scene, self.picture).pixels)
        self.assertEqual(first, second)
        self.assertEqual(self.scene.get(0).sphere.center, Vec3(0.0, 0.0, 0.0))
        self.assertEqual(self.scene.get(0).velocity, Vec3(1, 1, 1))

    def test_empty_scene_overwrites_with_background(self) -> None:
        self.picture.pixels[:] = [9] * len(self.picture.pixels)
        result = self.renderer.render(self.scene, self.picture)
        self.assertIs(result, self.picture)
        self.assertTrue(all(p == 0 for p in self.picture.pixels))

    def test_farthest_policy_picks_back_sphere(self) -> None:
        self.scene.add(0, Sphere(Vec3(0.0, 0.0, 0.0), 5.0, 1), Vec3(0, 0, 0))
        self.scene.add(1, Sphere(Vec3(0.0, 0.0, 30.0), 5.0, 3), Vec3(0, 0, 0))
        self.renderer.render(self.scene, self.picture)
        self.assertEqual(self.picture.get(10, 20), 3)

    def test_nearest_policy_picks_front_sphere(self) -> None:
        self.scene.add(0, Sphere(Vec3(0.0, 0.0, 0.0), 5.0, 1), Vec3(0, 0, 0))
        self.scene.add(1, Sphere(Vec3(0.0, 0.0, 30.0), 5.0, 3), Vec3(0, 0, 0))
        Renderer(hit_policy="nearest").render(self.scene, self.picture)
        self.assertEqual(self.picture.get(10, 20), 1)

    def test_unknown_policy(self) -> None:
        with self.assertRaises(ValueError):
            Renderer(hit_policy="closest")

    def test_camera_ray(self) -> None:
        center = self.renderer.camera_ray(self.scene, self.picture, 10, 20)
        self.assertEqual(center.origin, CAMERA)
        self.assertEqual(center.direction, Vec3(0.0, 0.0, 1.0))

        # Column 0 is left of center, its ray leans towards +x
        left = self.renderer.camera_ray(self.scene, self.picture, 10, 0)
        self.assertGreater(left.direction.x, 0.0)
        self.assertAlmostEqual(left.direction.magnitude(), 1.0)

    def test_aspect_stretches_rows(self) -> None:
        stretched = Renderer(aspect=2.0).camera_ray(self.scene, self.picture, 0, 20)
        plain = self.renderer.camera_ray(self.scene, self.picture, 0, 20)
        self.assertAlmostEqual(stretched.direction.y / stretched.direction.z,
                               2.0 * plain.direction.y / plain.direction.z)

    def test_cast_miss_is_background(self) -> None:
        ray = self.renderer.camera_ray(self.scene, self.picture, 0, 0)
        self.assertEqual(self.renderer.cast(self.scene, ray), 0)


if __name__ == "__main__":
    unittest.main()

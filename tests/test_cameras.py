import math
import unittest
from pyglm import glm
from tests.glm_case import GlmTestCase
from xform3d.model.cameras import PerspectiveCamera, OrthographicCamera
from xform3d.model.matrices import transform_point
from xform3d.model.projections import look_at, ortho, perspective


class TestPerspectiveCamera(GlmTestCase):
    def test_view_matrix_uses_look_at(self):
        """Test that the view matrix is the look-at matrix of the camera placement."""
        cam = PerspectiveCamera(eye=glm.vec3(2, 3, 4), center=glm.vec3(0, 1, 0))
        self.assertMatAlmostEqual(cam.view_matrix(), look_at(glm.vec3(2, 3, 4), glm.vec3(0, 1, 0), glm.vec3(0, 1, 0)))

    def test_projection_matrix(self):
        """Test that the projection uses the field of view in degrees and the viewport aspect."""
        cam = PerspectiveCamera(fov=60.0, near=0.5, far=50.0)
        self.assertMatAlmostEqual(cam.projection_matrix(1920, 1080), perspective(math.radians(60.0), 1920 / 1080, 0.5, 50.0))

    def test_target_projects_to_screen_center(self):
        """Test that the look-at target ends up in the middle of the screen."""
        cam = PerspectiveCamera(eye=glm.vec3(5, 5, 5))
        clip = cam.projection_matrix(800, 600) * cam.view_matrix()
        p = transform_point(clip, cam.center)
        self.assertAlmostEqual(p.x, 0.0, places=5)
        self.assertAlmostEqual(p.y, 0.0, places=5)
        self.assertTrue(-1.0 < p.z < 1.0)

    def test_focal_length(self):
        """Test the focal length in pixels for a 90 degree field of view."""
        cam = PerspectiveCamera(fov=90.0)
        self.assertAlmostEqual(cam.focal_length(600), 300.0, places=6)

    def test_defaults(self):
        """Test the default camera parameters."""
        cam = PerspectiveCamera()
        self.assertEqual(cam.fov, 45.0)
        self.assertEqual(cam.near, 0.1)
        self.assertEqual(cam.far, 100.0)
        self.assertEqual(cam.eye, glm.vec3(0, 0, 1))
        self.assertIsNot(cam.eye, PerspectiveCamera().eye)


class TestOrthographicCamera(GlmTestCase):
    def test_projection_matrix(self):
        """Test that the view box is centered and follows the viewport aspect."""
        cam = OrthographicCamera(height=4.0, near=1.0, far=10.0)
        self.assertMatAlmostEqual(cam.projection_matrix(200, 100), ortho(-4.0, 4.0, -2.0, 2.0, 1.0, 10.0))

    def test_box_edges_map_to_cube(self):
        """Test that the top-right corner of the near plane maps to (1, 1, -1)."""
        cam = OrthographicCamera(height=2.0, near=1.0, far=5.0, eye=glm.vec3(0, 0, 3))
        clip = cam.projection_matrix(300, 100) * cam.view_matrix()
        p = transform_point(clip, glm.vec3(3, 1, 2))
        self.assertAlmostEqual(p.x, 1.0, places=5)
        self.assertAlmostEqual(p.y, 1.0, places=5)
        self.assertAlmostEqual(p.z, -1.0, places=5)


if __name__ == '__main__':
    unittest.main()

import logging
import os
import unittest
from unittest import mock
from pyglm import glm
import xform3d


class TestConfigureLogging(unittest.TestCase):
    def test_level_from_environment(self):
        """Test that LOG_LEVEL selects the root logging level."""
        test_cases = {'debug': logging.DEBUG, 'WARNING': logging.WARNING, 'bogus': logging.INFO}

        for value, expected in test_cases.items():
            with self.subTest(LOG_LEVEL=value):
                with mock.patch.dict(os.environ, {'LOG_LEVEL': value}), \
                        mock.patch('logging.basicConfig') as basic_config:
                    xform3d.configure_logging()
                basic_config.assert_called_once_with(level=expected)

    def test_default_level(self):
        """Test that logging defaults to INFO when LOG_LEVEL is unset."""
        env = {k: v for k, v in os.environ.items() if k != 'LOG_LEVEL'}
        with mock.patch.dict(os.environ, env, clear=True), mock.patch('logging.basicConfig') as basic_config:
            xform3d.configure_logging()
        basic_config.assert_called_once_with(level=logging.INFO)


class TestBuilderLogging(unittest.TestCase):
    def test_steps_are_logged_at_debug(self):
        """Test that each builder step emits a debug record."""
        with self.assertLogs('xform3d.model.transforms', level='DEBUG') as logs:
            xform3d.Transform.new().translate(glm.vec3(1, 2, 3)).rotate(glm.vec3(0, 0, 1), 0.5)
        self.assertEqual(len(logs.records), 2)
        self.assertTrue(logs.output[0].startswith('DEBUG:xform3d.model.transforms:translate'))


class TestExports(unittest.TestCase):
    def test_top_level_names(self):
        """Test that the public constructors are importable from the package."""
        for name in ['translate', 'scale', 'shear_x', 'shear_y', 'shear_z', 'rotate', 'look_at', 'ortho',
                     'frustum', 'perspective', 'Transform', 'Transform3D', 'PerspectiveCamera',
                     'OrthographicCamera', 'DegenerateGeometryError', 'transform_point']:
            with self.subTest(name=name):
                self.assertTrue(hasattr(xform3d, name))


if __name__ == '__main__':
    unittest.main()

import unittest
import sys
import os

# Ensure project root is in path
root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

import numpy as np
from quatrot import Vector3D, Quaternion, rotate_around_axis
from scipy.spatial.transform import Rotation as SciRot

class TestMath(unittest.TestCase):
    def test_quaternion_rotate_vector_matches_scipy(self):
        axis = np.array([0, 0, 1])
        angle = np.pi / 4
        q = Quaternion.from_axis_angle(Vector3D(*axis), angle)
        v = Vector3D(1, 0, 0)
        v_rot = q.rotate(v)
        expected = SciRot.from_rotvec(axis * angle).apply(v.to_array())
        np.testing.assert_allclose(v_rot.v, expected, atol=1e-6)

    def test_rotate_around_axis_matches_scipy(self):
        for axis, angle, point in [
            ((1, 0, 0), 0.3, (0, 2, -1)),
            ((0, 1, 0), -1.2, (3, 0.5, 4)),
            ((1, 1, 1), 2.0, (1, -2, 0.25)),
            ((0.2, -0.7, 0.4), np.pi, (-5, 1, 2)),
        ]:
            with self.subTest(axis=axis, angle=angle, point=point):
                unit = np.asarray(axis, dtype=float) / np.linalg.norm(axis)
                rotated = rotate_around_axis(Vector3D(*unit), angle, Vector3D(*point))
                expected = SciRot.from_rotvec(unit * angle).apply(point)
                np.testing.assert_allclose(rotated.v, expected, atol=1e-6)

    def test_quaternion_layout_matches_scipy_scalar_last(self):
        unit = np.array([0, 1, 1]) / np.sqrt(2)
        q = Quaternion.from_axis_angle(Vector3D(*unit), 0.8)
        # scipy stores [x, y, z, w]
        expected = SciRot.from_rotvec(unit * 0.8).as_quat()
        np.testing.assert_allclose(q.q, np.roll(expected, 1), atol=1e-9)

if __name__ == '__main__':
    unittest.main()

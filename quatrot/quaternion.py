import numpy as np

from .errors import DegenerateInputError
from .logger import get_logger
from .vector3d import EPSILON, Vector3D

logger = get_logger(__name__)


class Quaternion:
    """
    Quaternion ``s + v.x*i + v.y*j + v.z*k`` stored as ``q = [s, x, y, z]``.

    Rotation quaternions should be unit length for the sandwich product to be
    a rigid rotation; this is not enforced, ``rotate_point`` normalizes.
    """

    __slots__ = ('q',)

    def __init__(self, s=1.0, v=None):
        if v is None:
            v = Vector3D()
        q = np.array([s, v.v[0], v.v[1], v.v[2]], dtype=float)
        q.flags.writeable = False
        object.__setattr__(self, 'q', q)

    def __setattr__(self, name, value):
        raise AttributeError(f"Quaternion is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Quaternion is immutable, cannot delete {name!r}")

    def to_array(self):
        """Return a writable copy of ``[s, x, y, z]``."""
        return self.q.copy()

    @property
    def s(self):
        return float(self.q[0])

    @property
    def v(self):
        return Vector3D(*self.q[1:])

    @staticmethod
    def from_axis_angle(axis, angle):
        """
        Build ``(cos(angle/2), axis*sin(angle/2))``.

        The axis is used as given; a non-unit axis gives a non-unit quaternion.
        """
        return Quaternion(np.cos(angle / 2.0), axis.multiply_scalar(np.sin(angle / 2.0)))

    def multiply(self, other):
        # Hamilton product, order matters
        s, v = self.s, self.v
        t, w = other.s, other.v
        return Quaternion(
            s * t - v.dot(w),
            v.cross(w).add(w.multiply_scalar(s)).add(v.multiply_scalar(t)),
        )

    def multiply_scalar(self, scalar):
        return Quaternion(self.s * scalar, self.v.multiply_scalar(scalar))

    def add(self, other):
        return Quaternion(self.s + other.s, self.v.add(other.v))

    def subtract(self, other):
        return Quaternion(self.s - other.s, self.v.subtract(other.v))

    def __add__(self, other):
        if isinstance(other, Quaternion):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Quaternion):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        elif isinstance(other, (int, float, np.number)):
            return self.multiply_scalar(other)
        return NotImplemented

    def __rmul__(self, other):
        # Only scalars reach here; Quaternion * Quaternion is handled by __mul__
        if isinstance(other, (int, float, np.number)):
            return self.multiply_scalar(other)
        return NotImplemented

    def conjugate(self):
        return Quaternion(self.s, self.v.multiply_scalar(-1.0))

    def length(self):
        return float(np.linalg.norm(self.q))

    def inverse(self, strict=False):
        length_squared = self.length() * self.length()
        if length_squared < EPSILON:
            if strict:
                raise DegenerateInputError('Quaternion.inverse', length_squared)
            logger.debug("inverse: squared length %.3g below epsilon, quaternion left unchanged",
                         length_squared)
            return self
        return self.conjugate().multiply_scalar(1.0 / length_squared)

    def normalize(self, strict=False):
        length = self.length()
        if length < EPSILON:
            if strict:
                raise DegenerateInputError('Quaternion.normalize', length)
            logger.debug("normalize: length %.3g below epsilon, quaternion left unchanged", length)
            return self
        return Quaternion(self.s / length, self.v.multiply_scalar(1.0 / length))

    def is_normalized(self):
        length_squared = float(np.dot(self.q, self.q))
        return abs(length_squared - 1.0) <= EPSILON

    def rotate(self, point):
        """Rotate a Vector3D by this quaternion and return a new Vector3D."""
        return rotate_point(self, point)

    def isclose(self, other, tol=EPSILON):
        return bool(np.allclose(self.q, other.q, rtol=0.0, atol=tol))

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self.q, other.q))

    def __hash__(self):
        return hash(tuple(self.q.tolist()))

    def __repr__(self):
        return f"Quaternion({self.q[0]}, {self.v!r})"


def rotate_point(q, point):
    """Rotate ``point`` by the sandwich product ``q * p * q^-1`` with ``q`` normalized first."""
    nq = q.normalize()
    # Embed the point as a pure quaternion
    p = Quaternion(0.0, point)
    rotated = nq.multiply(p).multiply(nq.inverse())
    # Scalar part is ~0 for a rotation and is dropped
    return rotated.v


def rotate_around_axis(axis, angle, point):
    """Rotate ``point`` by ``angle`` radians about ``axis`` (right-hand rule)."""
    return rotate_point(Quaternion.from_axis_angle(axis, angle), point)

import numpy as np

from .errors import DegenerateInputError
from .logger import get_logger

# Magnitudes below this are treated as zero wherever they would be a divisor.
EPSILON = 1e-5

logger = get_logger(__name__)


def rad_to_deg(radians):
    return radians * 180.0 / np.pi


def deg_to_rad(degrees):
    return degrees * np.pi / 180.0


class Vector3D:
    """Immutable 3-component vector; every operation returns a new Vector3D."""

    __slots__ = ('v',)

    def __init__(self, x=0, y=0, z=0):
        v = np.array([x, y, z], dtype=float)
        v.flags.writeable = False
        object.__setattr__(self, 'v', v)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vector3D is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Vector3D is immutable, cannot delete {name!r}")

    def to_array(self):
        """Return a writable copy of the components."""
        return self.v.copy()

    @classmethod
    def from_dict(cls, data):
        return cls(data['x'], data['y'], data['z'])

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @property
    def x(self):
        return float(self.v[0])

    @property
    def y(self):
        return float(self.v[1])

    @property
    def z(self):
        return float(self.v[2])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def add(self, other):
        return Vector3D(*(self.v + other.v))

    def subtract(self, other):
        return Vector3D(*(self.v - other.v))

    def multiply_scalar(self, scalar):
        return Vector3D(*(self.v * scalar))

    def divide_scalar(self, scalar):
        # Zero divisor propagates as inf/nan components
        with np.errstate(divide='ignore', invalid='ignore'):
            return self.multiply_scalar(np.float64(1.0) / scalar)

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3D):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float, np.number)):
            return self.multiply_scalar(scalar)
        return NotImplemented

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float, np.number)):
            return self.divide_scalar(scalar)
        return NotImplemented

    def __neg__(self):
        return self.multiply_scalar(-1.0)

    def dot(self, other):
        """Return scalar dot‐product between two vectors."""
        return float(np.dot(self.v, other.v))

    scalar_product = dot

    def cross(self, other):
        return Vector3D(*np.cross(self.v, other.v))

    def length(self):
        return float(np.linalg.norm(self.v))

    magnitude = length

    def normalize(self, strict=False):
        """
        Return the unit vector in the same direction.

        Below EPSILON the vector is returned unchanged, or DegenerateInputError
        is raised when ``strict`` is set.
        """
        length = self.length()
        if length >= EPSILON:
            return self.divide_scalar(length)
        if strict:
            raise DegenerateInputError('Vector3D.normalize', length)
        logger.debug("normalize: length %.3g below epsilon, vector left unchanged", length)
        return self

    def angle(self, other):
        """Angle between this vector and ``other`` in degrees (0 if either is near zero)."""
        lengths = self.length() * other.length()
        if lengths < EPSILON:
            return 0.0
        ratio = np.clip(self.dot(other) / lengths, -1.0, 1.0)
        return float(rad_to_deg(np.arccos(ratio)))

    angle_degrees = angle

    def isclose(self, other, tol=EPSILON):
        return bool(np.allclose(self.v, other.v, rtol=0.0, atol=tol))

    def __eq__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(np.array_equal(self.v, other.v))

    def __hash__(self):
        return hash(tuple(self.v.tolist()))

    def show(self):
        print(self)

    def __str__(self):
        return f"[{self.x:.1f}/{self.y:.1f}/{self.z:.1f}]"

    def __repr__(self):
        return f"Vector3D({self.v[0]}, {self.v[1]}, {self.v[2]})"

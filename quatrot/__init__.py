# quatrot/__init__.py

from .vector3d import Vector3D, EPSILON, rad_to_deg, deg_to_rad
from .quaternion import Quaternion, rotate_point, rotate_around_axis
from .errors import DegenerateInputError
from .logger import get_logger
from .utils import load_config

__all__ = [
    'Vector3D', 'Quaternion',
    'rotate_point', 'rotate_around_axis',
    'EPSILON', 'rad_to_deg', 'deg_to_rad',
    'DegenerateInputError',
    'get_logger', 'load_config',
]

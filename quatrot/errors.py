"""
Exceptions raised by the strict variants of the vector/quaternion operations.
"""


class DegenerateInputError(ValueError):
    """Raised when a near-zero magnitude would be used as a divisor."""

    def __init__(self, operation, magnitude):
        self.operation = operation
        self.magnitude = magnitude
        super().__init__(f"{operation}: magnitude {magnitude:.3g} is below epsilon")

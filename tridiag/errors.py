class DimensionMismatch(ValueError):
    """Raised when band lengths violate the structure of a matrix type or when the
    operands of an arithmetic operation have incompatible sizes.

    """


class ArgumentError(ValueError):
    """Raised when an argument is structurally invalid for the requested operation:
    an out-of-range diagonal offset, an invalid dimension, a write to a position
    outside the band, or a symmetry violation during conversion.

    """

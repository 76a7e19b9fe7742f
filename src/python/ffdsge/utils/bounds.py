import numpy as np
from ..errors import InvalidTransformError

class AbstractTransform:
    """
    Maps a parameter between its bounded (model) value and a free value on
    the real line. (a, b) are the transform bounds of the parameter.
    """
    name = None

    def to_bounded(self, u, a, b):
        raise NotImplementedError

    def to_unbounded(self, x, a, b):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"

class Untransformed(AbstractTransform):
    name = "untransformed"

    def to_bounded(self, u, a, b):
        return u

    def to_unbounded(self, x, a, b):
        return x

class SquareRoot(AbstractTransform):
    """
    Maps R onto the open interval (a, b):
        x = a + (b-a)/2 * (1 + u/sqrt(1+u^2))
    """
    name = "square_root"

    def to_bounded(self, u, a, b):
        return a + (b - a) / 2 * (1 + u / np.sqrt(1 + u**2))

    def to_unbounded(self, x, a, b):
        cx = (2 * x - a - b) / (b - a)
        return cx / np.sqrt(1 - cx**2)

class Exponential(AbstractTransform):
    """
    Maps R onto the half-line (a, inf):
        x = a + exp(u)
    """
    name = "exponential"

    def to_bounded(self, u, a, b):
        return a + np.exp(u)

    def to_unbounded(self, x, a, b):
        return np.log(x - a)

TRANSFORMS = {
    "untransformed": Untransformed,
    "identity": Untransformed,
    "square_root": SquareRoot,
    "sqrt_sigmoid": SquareRoot,
    "exponential": Exponential,
}

def get_transform(kind):
    """
    Returns a transform instance for `kind`, which may be a transform
    instance, a transform class or one of the names in TRANSFORMS.
    """
    if isinstance(kind, AbstractTransform):
        return kind
    if isinstance(kind, type) and issubclass(kind, AbstractTransform):
        return kind()
    if isinstance(kind, str) and kind.lower() in TRANSFORMS:
        return TRANSFORMS[kind.lower()]()
    raise InvalidTransformError(f"Unknown parameter transform: {kind!r}")

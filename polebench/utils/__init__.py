from polebench.utils.ranges import BoundedRange
from polebench.utils.wrapping import wrap_angles

__all__ = [
    "BoundedRange",
    "wrap_angles",
]

from typing import Any
from collections.abc import Sized

def get_dimension(element: Any) -> int:
    """Number of entries in a sized element, 1 for a bare scalar, 0 for None."""
    if element is None:
        return 0
    if isinstance(element, (str, bytes)):
        return 1
    if isinstance(element, Sized):
        return len(element)
    return 1

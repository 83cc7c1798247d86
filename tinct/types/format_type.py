from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

class HexCase(str, Enum):
    UPPER = "upper"
    LOWER = "lower"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
    FormatType.PERCENTAGE: np.float32,
}

DEFAULT_HEX_CASE = HexCase.UPPER

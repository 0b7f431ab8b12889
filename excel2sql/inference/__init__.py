"""
Type inference for raw tabular grids.
"""

from .inferencer import FALLBACK_TYPE, TypeInferencer, infer
from .parsers import TYPE_CHECKS, is_blank, is_null_marker, parse_value

__all__ = [
    "FALLBACK_TYPE",
    "TYPE_CHECKS",
    "TypeInferencer",
    "infer",
    "is_blank",
    "is_null_marker",
    "parse_value",
]

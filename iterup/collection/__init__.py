from .collect import collect, to_array, to_list
from .fold import fold, for_each, for_each_indexed, reduce
from .numeric import Number, max, min, sum
from .range import RangeArgument, as_range_argument, range

__all__ = (
    # Construction
    "RangeArgument",
    "as_range_argument",
    "range",
    # Terminal
    "collect",
    "to_array",
    "to_list",
    "fold",
    "reduce",
    "for_each",
    "for_each_indexed",
    # Numeric
    "Number",
    "sum",
    "min",
    "max",
)

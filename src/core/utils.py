# core/utils.py
import math

INFINITY = math.inf

def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divides like IEEE-754 doubles do: x/0 gives a signed infinity and 0/0 gives NaN.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

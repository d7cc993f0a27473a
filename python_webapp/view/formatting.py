"""표시용 숫자 포매터"""
import math

from config.settings import NA_PLACEHOLDER


def fmt_metric(value, fmt=".2f"):
    """None/NaN/숫자 모두 안전하게 포매팅"""
    if value is None:
        return NA_PLACEHOLDER
    try:
        if math.isnan(value):
            return NA_PLACEHOLDER
        return format(value, fmt)
    except (TypeError, ValueError):
        return str(value)


def fmt_number(value):
    """헤더 값 표시 (10.0 → '10', 10.5 → '10.5')"""
    if value is None:
        return NA_PLACEHOLDER
    try:
        if math.isnan(value):
            return NA_PLACEHOLDER
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))
    except (TypeError, ValueError):
        return str(value)

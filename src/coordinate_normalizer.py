import math
import re
from numbers import Real
from typing import Any, Optional

from coordinate_types import NormalizedPair

_NOISE = re.compile(r"[^\d.\-]")


# --- Clean a raw value scraped from a document into a float ---
def normalize_number(value: Any) -> Optional[float]:
    """
    Coerce a raw coordinate value to a finite float, or None.

    Numbers pass through when finite. Text loses every character that is not a
    digit, '.' or '-'; a '-' survives only as the leading sign, and a second
    '.' is treated as a typo whose digits join the fractional part
    ("2.414.688" -> 2.414688). Never raises.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
        return number if math.isfinite(number) else None

    text = _NOISE.sub("", str(value).strip())
    negative = text.startswith("-")
    text = text.replace("-", "")

    parts = text.split(".")
    if len(parts) > 2:
        text = parts[0] + "." + "".join(parts[1:])

    if negative:
        text = "-" + text

    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def normalize_pair(x: Any, y: Any) -> NormalizedPair:
    return NormalizedPair(normalize_number(x), normalize_number(y))

# ---------------------------
# Record / value helpers
# ---------------------------
import math
import re
from decimal import Decimal

NAN = float("nan")
# ints past this lose digits as doubles, so they render through float
_EXACT_INT_LIMIT = 2 ** 53


class _Missing:
    """Returned by resolve() when no alias matches a record key."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()

_STRIP_SEPARATORS = re.compile(r"[, ]+")
_STRIP_NON_NUMERIC = re.compile(r"[^\d.-]")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or not math.isnan(value)


def as_text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return render(value)
    if isinstance(value, list):
        return ",".join("" if v is None else as_text(v) for v in value)
    if isinstance(value, dict):
        # objects carry no digits
        return ""
    return str(value)


def coerce(value):
    """
    Turn a raw JSON value into an int/float, or NAN when there is no usable number.

    Numbers pass through untouched. Anything else is read as text: commas and
    spaces go, then every char other than digits, '.' and '-'. What is left
    must be a plain decimal literal ("1,234" -> 1234, "$250,000" -> 250000,
    "50 sqft" -> 50, "1.2.3" -> NAN).
    """
    if value is None or value is MISSING:
        return NAN
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    cleaned = _STRIP_NON_NUMERIC.sub("", _STRIP_SEPARATORS.sub("", as_text(value)))
    if not cleaned:
        return NAN
    try:
        return float(cleaned) if "." in cleaned else int(cleaned)
    except ValueError:
        return NAN


def render(value) -> str:
    """
    Canonical text for a coerced number; empty string for NAN.

    Plain positional decimals, except at 1e21 and above or below 1e-6 where
    the shortest digits go in exponent form ("0.00005", "1e+21", "1e-7").
    """
    if not is_number(value):
        return ""
    if isinstance(value, int) and abs(value) < _EXACT_INT_LIMIT:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exp + k  # decimal point sits n digits into `digits`
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if n >= 1 else '-'}{abs(n - 1)}"
    return sign + body


def resolve(record, aliases):
    """First value whose key matches an alias case-insensitively, alias order first."""
    if not isinstance(record, dict):
        return MISSING
    keys = list(record.keys())
    for alias in aliases:
        wanted = alias.lower()
        for k in keys:
            if isinstance(k, str) and k.lower() == wanted:
                return record[k]
    return MISSING


def locate(document) -> list:
    # root list, else first list-valued property (one level only), else wrap
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        for v in document.values():
            if isinstance(v, list):
                return v
    return [document]


def parse_float_prefix(text):
    """Leading float in `text` ("1500abc" -> 1500.0), or None."""
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    t = str(text).lstrip()
    if t.startswith(("Infinity", "+Infinity")):
        return math.inf
    if t.startswith("-Infinity"):
        return -math.inf
    m = _FLOAT_PREFIX.match(t)
    if not m:
        return None
    try:
        return float(m.group(0))
    except ValueError:
        return None

_SMALL_ORDINALS = (
    "zeroth",
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "10th",
    "11th",
    "12th",
    "13th",
)

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def nth(n: int) -> str:
    """Ordinal form of an attempt number: "first", "13th", "21st", "111th".

    Numbers ending in 11, 12 or 13 always take "th", so 112 is "112th" and
    113 is "113th". A last-digit-only rule would give "112nd" and "113rd".
    """
    if n < len(_SMALL_ORDINALS):
        return _SMALL_ORDINALS[n]
    if n % 100 in (11, 12, 13):
        return f"{n}th"
    return f"{n}{_SUFFIXES.get(n % 10, 'th')}"

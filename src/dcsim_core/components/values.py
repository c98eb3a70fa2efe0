# src/dcsim_core/components/values.py
"""
Parses the human-readable magnitude strings the editor stores on components
("330", "10k", "100uF", "9V") into plain base-unit floats.

The suffix convention is the editor's own, not SI: a bare "m" means mega, and only
the "mhz" and "mv" spellings escape that rule. Presets depend on this, so it is kept
as-is.
"""
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Leading decimal numeral, in the forms a JavaScript-style parseFloat accepts.
_LEADING_NUMBER_REGEX = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
)

# (substring, excluded substrings, multiplier); the first matching rule wins.
_MAGNITUDE_RULES = (
    ("k", (), 1e3),
    ("m", ("mhz", "mv"), 1e6),
    ("u", (), 1e-6),
    ("n", (), 1e-9),
    ("p", (), 1e-12),
)


def _leading_number(text: str) -> Optional[float]:
    match = _LEADING_NUMBER_REGEX.match(text)
    if not match:
        return None
    return float(match.group(0))


def parse_value(value: Optional[str]) -> float:
    """
    Converts a magnitude string into a number in base units.

    The input is lower-cased and trimmed, the leading numeral is extracted and a
    multiplier is applied based on the first suffix rule whose substring occurs
    anywhere in the text. Never raises: a missing or unparseable numeral yields 0.

    Args:
        value: The raw magnitude string, or None.

    Returns:
        The parsed value, or 0.0 if no leading numeral is present.
    """
    if not value:
        return 0.0
    text = value.lower().strip()
    number = _leading_number(text)
    if number is None:
        logger.debug(f"No numeric magnitude in value string '{value}'; using 0.")
        return 0.0

    for marker, exclusions, multiplier in _MAGNITUDE_RULES:
        if marker in text and not any(excl in text for excl in exclusions):
            return number * multiplier
    return number

import re
from typing import Dict

# label -> numeral pattern; counts are whole numbers, measurements may carry a fraction
_INTEGER = r"(\d+)"
_DECIMAL = r"(\d+\.?\d*)"

FIELD_PATTERNS = {
    name: re.compile(rf"{name}:\s*{numeral}", re.IGNORECASE)
    for name, numeral in [
        ("Pregnancies",              _INTEGER),
        ("Glucose",                  _DECIMAL),
        ("BloodPressure",            _DECIMAL),
        ("SkinThickness",            _DECIMAL),
        ("Insulin",                  _DECIMAL),
        ("BMI",                      _DECIMAL),
        ("DiabetesPedigreeFunction", _DECIMAL),
        ("Age",                      _INTEGER),
    ]
}

FIELD_NAMES = tuple(FIELD_PATTERNS)


def extract_fields(text: str) -> Dict[str, float]:
    """
    Scrape the labeled measurements out of OCR text.

    Only fields whose label is found (first occurrence anywhere in the text)
    and whose numeral parses as a float end up in the result.
    """
    text = text.strip()
    if not text:
        return {}

    extracted = {}
    for name, pattern in FIELD_PATTERNS.items():
        match = pattern.search(text)
        if not match:
            continue
        try:
            extracted[name] = float(match.group(1))
        except ValueError:
            continue
    return extracted

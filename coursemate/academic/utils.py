# academic/utils.py

import re
from typing import List

# Subject of 2-6 letters, optional whitespace, 3-digit number (e.g. "cmput174", "MATH 144")
COURSE_CODE_PATTERN = re.compile(r"^([A-Za-z]{2,6})\s*(\d{3})$")


def normalize_course_code(course_code: str) -> str:
    """
    Rewrite a course code into its canonical "<SUBJECT> <NUMBER>" form.

    Tokens that don't look like a course code are returned trimmed and
    uppercased, without forcing a separator.
    """
    # Uppercase before matching: some letters only become ASCII once uppercased ("ß" -> "SS")
    token = course_code.strip().upper()
    match = COURSE_CODE_PATTERN.match(token)
    if match:
        return f"{match.group(1)} {match.group(2)}"
    return token


def parse_completed_courses(text: str) -> List[str]:
    """
    Turn comma-separated free text into a list of normalized course codes.

    Input order and duplicates are kept; empty tokens are dropped.
    """
    if not text:
        return []
    codes = []
    for token in text.split(","):
        code = normalize_course_code(token)
        if code:
            codes.append(code)
    return codes

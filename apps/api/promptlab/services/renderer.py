"""Line-by-line formatting of a generated prompt body."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from promptlab.core.constants import SECTION_SEPARATOR
from promptlab.prompts import KNOWN_ELEMENT_LETTERS

# Section headers like "C – ", "T – " (letters, space, EN DASH, space) at line start
_SECTION_HEADER_RE = re.compile(r"^([A-Z]+)" + re.escape(SECTION_SEPARATOR))


class LineKind(str, Enum):
    PLAIN = "plain"
    SECTIONED = "sectioned"


@dataclass(frozen=True)
class FormattedLine:
    kind: LineKind
    text: str = ""
    header: str = ""
    content: str = ""


def _is_header(letters: str, strict: bool) -> bool:
    if not strict:
        return True
    return len(letters) == 1 and letters in KNOWN_ELEMENT_LETTERS


def iter_formatted_lines(body: str, strict: bool = False) -> Iterator[FormattedLine]:
    """Yield one FormattedLine per non-blank line of body, in order.

    strict: only a single known framework letter counts as a header; any other
    prefix (e.g. "X – ", "TC – ") stays plain text.
    """
    for line in (body or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        match = _SECTION_HEADER_RE.match(trimmed)
        if match and _is_header(match.group(1), strict):
            header = match.group(0)
            yield FormattedLine(
                kind=LineKind.SECTIONED,
                header=header,
                content=trimmed[len(header):].strip(),
            )
        else:
            yield FormattedLine(kind=LineKind.PLAIN, text=trimmed)

"""Recognition of SFD record lines.

SFD is line oriented: every record starts with a fixed keyword. Only the
records needed to locate glyph groups, their ids, advance widths and the
outline layer are recognised here.
"""

from enum import Enum

START_CHAR = "StartChar:"
END_CHAR = "EndChar"
ENCODING = "Encoding:"
WIDTH = "Width:"
REFER = "Refer:"
SPLINE_SET = "SplineSet"
END_SPLINE_SET = "EndSplineSet"


class LineKind(Enum):
    """Kind of an SFD record line."""

    START_CHAR = START_CHAR
    END_CHAR = END_CHAR
    ENCODING = ENCODING
    WIDTH = WIDTH
    REFER = REFER
    SPLINE_SET = SPLINE_SET
    END_SPLINE_SET = END_SPLINE_SET
    OTHER = ""


_PREFIXES = [
    LineKind.START_CHAR,
    LineKind.END_CHAR,
    LineKind.ENCODING,
    LineKind.WIDTH,
    LineKind.REFER,
    LineKind.SPLINE_SET,
    LineKind.END_SPLINE_SET,
]


def classify(line: str) -> LineKind:
    """Classify a line by its record prefix.

    Args:
        line: A raw document line

    Returns:
        The matching LineKind, or LineKind.OTHER
    """
    for kind in _PREFIXES:
        if line.startswith(kind.value):
            return kind
    return LineKind.OTHER


def is_section(line: str, section: str) -> bool:
    """Check if a line opens the layer section with the given name."""
    return line.startswith(section)


def record_fields(line: str) -> list[str]:
    """Return the whitespace separated fields after the first colon."""
    _, _, rest = line.partition(":")
    return rest.split()


def parse_glyph_name(line: str) -> str | None:
    """Return the glyph name of a `StartChar:` line."""
    parts = line.split()
    if len(parts) < 2:
        return None
    return parts[1]


def parse_encoding_gid(line: str) -> int | None:
    """Return the glyph id of an `Encoding:` line.

    The id is the 4th whitespace separated field of the line, counting the
    keyword itself (``Encoding: 65 65 5`` has id 5). Lines with fewer fields
    or a non-integer id carry no id.
    """
    parts = line.split()
    if len(parts) < 4:
        return None
    try:
        return int(parts[3])
    except ValueError:
        return None


def parse_width(lines: list[str]) -> float:
    """Return the advance width of a glyph, 0 when undeclared."""
    for line in lines:
        if classify(line) is LineKind.WIDTH:
            fields = record_fields(line)
            if not fields:
                return 0.0
            try:
                return float(fields[0])
            except ValueError:
                return 0.0
    return 0.0

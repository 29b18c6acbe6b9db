"""Decoding of `SplineSet` lines into spline commands.

Operands precede the one-letter command; `l` and `c` lines carry a point
flag field after their operands, e.g.::

    100 0 m 1
    100 700 l 1,0,-1
    150 750 250 750 300 700 c 0x4,-1
"""

import logging
import re

from sfdpreview.domain import CurveTo, LineTo, MoveTo, PointType, SplineCommand

logger = logging.getLogger(__name__)

_OPERAND_COUNTS = {"m": 2, "l": 2, "c": 6}

# digits, optionally followed by a non-digit separator and a trailing token
_POINT_FLAG = re.compile(r"(\d+)(?:\D.*)?")

_POINT_TYPES = {
    0: PointType.CURVE,
    1: PointType.CORNER,
    2: PointType.TANGENT,
    3: PointType.EXTREME,
}


def parse_point_flag(token: str) -> int | None:
    """Parse the integer prefix of a point flag field.

    Examples:
        >>> parse_point_flag("5")
        5
        >>> parse_point_flag("9x1")
        9
        >>> parse_point_flag("1,0,-1")
        1
        >>> parse_point_flag("x") is None
        True
    """
    match = _POINT_FLAG.fullmatch(token)
    if match is None:
        return None
    return int(match.group(1))


def point_type_from_flag(flag: int | None) -> PointType:
    """Map a point flag to its point type (only ``flag % 4`` matters)."""
    if flag is None:
        return PointType.UNKNOWN
    return _POINT_TYPES.get(flag % 4, PointType.UNKNOWN)


def _find_keyword(tokens: list[str]) -> int | None:
    for index, token in enumerate(tokens):
        if token in _OPERAND_COUNTS:
            return index
    return None


def _flag_token(tokens: list[str], keyword_index: int, operand_count: int) -> str | None:
    if keyword_index + 1 < len(tokens):
        return tokens[keyword_index + 1]
    if keyword_index > operand_count:
        return tokens[operand_count]
    return None


def decode(line: str) -> SplineCommand | None:
    """Decode one spline line.

    Args:
        line: A line from a `SplineSet` block

    Returns:
        MoveTo, LineTo or CurveTo; None for blank, unknown or short lines
    """
    tokens = line.split()
    keyword_index = _find_keyword(tokens)
    if keyword_index is None:
        return None

    keyword = tokens[keyword_index]
    operand_count = _OPERAND_COUNTS[keyword]
    if keyword_index < operand_count:
        logger.debug("Too few operands in spline line: %r", line)
        return None

    try:
        operands = [float(token) for token in tokens[:operand_count]]
    except ValueError:
        logger.debug("Non-numeric operand in spline line: %r", line)
        return None

    if keyword == "m":
        return MoveTo(*operands)

    token = _flag_token(tokens, keyword_index, operand_count)
    point_type = point_type_from_flag(parse_point_flag(token) if token else None)
    if keyword == "l":
        return LineTo(*operands, point_type=point_type)
    return CurveTo(*operands, point_type=point_type)


def decode_all(lines: list[str]) -> list[SplineCommand]:
    """Decode every spline line, skipping the ones that are not commands."""
    commands = []
    for line in lines:
        command = decode(line)
        if command is not None:
            commands.append(command)
    return commands

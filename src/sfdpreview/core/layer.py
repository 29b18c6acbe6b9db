"""Extraction of one layer (references and spline lines) from a glyph."""

from dataclasses import dataclass, field

from sfdpreview.core.classifier import LineKind, classify, is_section, record_fields
from sfdpreview.domain import ReferenceRecord

_REFERENCE_FIELDS = 9


@dataclass
class LayerData:
    """Raw content of a layer section.

    Attributes:
        references: `Refer:` lines, verbatim and in declaration order
        spline_lines: Lines between `SplineSet` and `EndSplineSet`
    """

    references: list[str] = field(default_factory=list)
    spline_lines: list[str] = field(default_factory=list)


def extract_layer(section: str, lines: list[str]) -> LayerData:
    """Isolate the references and spline lines of a layer.

    Scanning starts at the first line beginning with ``section``. Inside the
    section, `Refer:` lines are collected, and lines bracketed by
    `SplineSet`/`EndSplineSet` are collected as spline lines. The first other
    non-blank line outside a spline block ends the section.

    Args:
        section: Layer keyword, e.g. "Fore"
        lines: Lines of one glyph

    Returns:
        LayerData, empty when the section is absent
    """
    layer = LayerData()
    in_section = False
    in_spline_set = False

    for line in lines:
        if is_section(line, section):
            in_section = True
            continue
        if not in_section:
            continue

        kind = classify(line)
        if kind is LineKind.REFER:
            layer.references.append(line)
        elif kind is LineKind.SPLINE_SET:
            in_spline_set = True
        elif kind is LineKind.END_SPLINE_SET:
            in_spline_set = False
        elif in_spline_set:
            layer.spline_lines.append(line)
        elif line.strip():
            break

    return layer


def parse_reference(line: str) -> ReferenceRecord | None:
    """Parse a `Refer:` line.

    Fields after the first colon are ``gid codepoint selection a b c d e f``;
    anything beyond the ninth field is ignored.

    Args:
        line: A `Refer:` line

    Returns:
        ReferenceRecord, or None for a malformed line
    """
    fields = record_fields(line)
    if len(fields) < _REFERENCE_FIELDS:
        return None

    try:
        gid = int(fields[0])
        codepoint = int(fields[1])
        a, b, c, d, e, f = (float(value) for value in fields[3:_REFERENCE_FIELDS])
    except ValueError:
        return None

    return ReferenceRecord(
        gid=gid, codepoint=codepoint, selected=fields[2], a=a, b=b, c=c, d=d, e=e, f=f
    )


def parse_references(lines: list[str]) -> list[ReferenceRecord]:
    """Parse every well-formed `Refer:` line, preserving order."""
    references = []
    for line in lines:
        reference = parse_reference(line)
        if reference is not None:
            references.append(reference)
    return references

"""Shared fixtures and helpers for sfdpreview tests."""

import pytest

SQUARE_SPLINES = [
    "10 10 m 1",
    " 10 90 l 1",
    " 90 90 l 1",
    " 90 10 l 1",
    " 10 10 l 1",
]


def glyph_lines(
    name: str,
    gid: int,
    width: float = 500,
    splines: list[str] | None = None,
    refers: list[str] | None = None,
) -> list[str]:
    """Build the lines of one SFD glyph group."""
    lines = [
        f"StartChar: {name}",
        f"Encoding: {gid} {gid} {gid}",
        f"Width: {width:g}",
        "Flags: W",
        "LayerCount: 2",
        "Fore",
    ]
    lines.extend(refers or [])
    if splines:
        lines.append("SplineSet")
        lines.extend(splines)
        lines.append("EndSplineSet")
    lines.append("EndChar")
    return lines


def document_lines(*glyphs: list[str]) -> list[str]:
    """Build a small SFD document from glyph groups."""
    lines = [
        "SplineFontDB: 3.2",
        "FontName: Test",
        "Ascent: 800",
        "Descent: 200",
        "BeginChars: 65536 3",
        "",
    ]
    for glyph in glyphs:
        lines.extend(glyph)
        lines.append("")
    lines.append("EndChars")
    lines.append("EndSplineFont")
    return lines


def make_fetcher(glyphs: dict[int, list[str]]):
    """Build an async fetcher over a dict, recording requested ids."""
    calls: list[int] = []

    async def fetch(gid: int) -> list[str] | None:
        calls.append(gid)
        return glyphs.get(gid)

    fetch.calls = calls  # type: ignore[attr-defined]
    return fetch


@pytest.fixture
def square_glyph() -> list[str]:
    """Glyph 5 with a square outline from (10, 10) to (90, 90)."""
    return glyph_lines("square", 5, width=100, splines=SQUARE_SPLINES)


@pytest.fixture
def composite_glyph() -> list[str]:
    """Glyph 6 referencing glyph 5 with the identity transform."""
    return glyph_lines("composite", 6, width=60, refers=["Refer: 5 -1 N 1 0 0 1 0 0 2"])

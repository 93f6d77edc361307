"""Tests for ansihtml.palette."""

from __future__ import annotations

from ansihtml.models import ColorCategory
from ansihtml.palette import DEFAULT_PALETTE, Palette


def test_has_256_entries() -> None:
    assert len(DEFAULT_PALETTE) == 256


def test_named_colors() -> None:
    assert DEFAULT_PALETTE[0].rgb == (0, 0, 0)
    assert DEFAULT_PALETTE[0].name == "ansi-black"
    assert DEFAULT_PALETTE[1].rgb == (187, 0, 0)
    assert DEFAULT_PALETTE[9].rgb == (255, 85, 85)
    assert DEFAULT_PALETTE[15].name == "ansi-bright-white"
    assert all(c.category is ColorCategory.NAMED16 for c in DEFAULT_PALETTE.named)


def test_cube_corners() -> None:
    assert DEFAULT_PALETTE[16].rgb == (0, 0, 0)
    assert DEFAULT_PALETTE[21].rgb == (0, 0, 255)
    assert DEFAULT_PALETTE[196].rgb == (255, 0, 0)
    assert DEFAULT_PALETTE[231].rgb == (255, 255, 255)
    assert DEFAULT_PALETTE[16].category is ColorCategory.INDEXED
    assert DEFAULT_PALETTE[16].name is None


def test_grey_ramp() -> None:
    assert DEFAULT_PALETTE[232].rgb == (8, 8, 8)
    assert DEFAULT_PALETTE[255].rgb == (238, 238, 238)


def test_normal_and_bright_lookup() -> None:
    palette = Palette()
    assert palette.normal(3) is palette[3]
    assert palette.bright(3) is palette[11]


def test_css_rgb() -> None:
    assert DEFAULT_PALETTE[1].css_rgb() == "rgb(187,0,0)"

"""Tests for ansihtml.converter: the streaming driver loop."""

from __future__ import annotations

import pytest

from ansihtml import ansi_to_html
from ansihtml.config import ConverterConfig
from ansihtml.converter import AnsiToHtml

# Styled text runs are single characters so that splitting inside text cannot
# change how spans are grouped.
STREAM = (
    "a<b> \x1b[1;31mR\x1b[0m & "
    "\x1b[38;5;196mX\x1b[48;2;10;20;30mY\x1b[0m "
    "\x1b]8;;https://e.com\x07go\x1b]8;;\x1b\\ "
    "\x1b(B\x1b[2Jz\x1b[?25l!\x1b[4m_\x1b[m"
)


class TestExamples:
    def test_bold_red(self, converter: AnsiToHtml) -> None:
        assert converter.convert("\x1b[1;31mHello\x1b[0m") == (
            '<span style="font-weight:bold;color:rgb(187,0,0)">Hello</span>'
        )

    def test_256_color_inline_in_class_mode(self, class_converter: AnsiToHtml) -> None:
        assert class_converter.convert("\x1b[38;5;196mX\x1b[0m") == (
            '<span style="color:rgb(255,0,0)">X</span>'
        )

    def test_hyperlink(self, converter: AnsiToHtml) -> None:
        out = converter.convert("\x1b]8;;http://example.com\x07link\x1b]8;;\x07")
        assert out == '<a href="http://example.com">link</a>'

    def test_javascript_link_dropped(self, converter: AnsiToHtml) -> None:
        assert converter.convert("\x1b]8;;javascript:alert(1)\x07x\x1b]8;;\x07") == ""

    def test_plain_text_escaped(self, converter: AnsiToHtml) -> None:
        assert converter.convert("<b>") == "&lt;b&gt;"

    def test_split_sequence(self, converter: AnsiToHtml) -> None:
        assert converter.convert("abc\x1b[") == "abc"
        assert converter.pending
        assert converter.convert("31mX") == '<span style="color:rgb(187,0,0)">X</span>'
        assert not converter.pending


class TestDriver:
    def test_non_sgr_sequences_skipped(self, converter: AnsiToHtml) -> None:
        assert converter.convert("\x1b[2J\x1b[Hhi\x1b(B!") == "hi!"

    def test_malformed_escape_skips_only_esc(self, converter: AnsiToHtml) -> None:
        assert converter.convert("a\x1b[1:2mb") == "a[1:2mb"

    def test_state_persists_across_calls(self, converter: AnsiToHtml) -> None:
        converter.convert("\x1b[3m")
        assert converter.convert("x") == '<span style="font-style:italic">x</span>'
        assert converter.convert("y") == '<span style="font-style:italic">y</span>'

    def test_hyperlink_text_is_not_styled(self, converter: AnsiToHtml) -> None:
        out = converter.convert("\x1b[1mb\x1b]8;;https://e.com\x07go\x1b]8;;\x07")
        assert out == (
            '<span style="font-weight:bold">b</span><a href="https://e.com">go</a>'
        )

    def test_config_edit_applies_to_next_call(self, converter: AnsiToHtml) -> None:
        converter.convert("\x1b[31m")
        converter.config.use_classes = True
        assert converter.convert("x") == '<span class="ansi-red-fg">x</span>'

    def test_replacing_config(self, converter: AnsiToHtml) -> None:
        converter.config = ConverterConfig(escape_html=False)
        assert converter.convert("<i>") == "<i>"

    def test_reset(self, converter: AnsiToHtml) -> None:
        converter.convert("\x1b[1mx\x1b[")
        converter.reset()
        assert not converter.pending
        assert converter.convert("y") == "y"

    def test_empty_chunk(self, converter: AnsiToHtml) -> None:
        assert converter.convert("") == ""


class TestFlush:
    def test_flush_with_nothing_pending(self, converter: AnsiToHtml) -> None:
        converter.convert("abc")
        assert converter.flush() == ""

    def test_flush_skips_truncated_escape(self, converter: AnsiToHtml) -> None:
        assert converter.convert("ok\x1b") == "ok"
        assert converter.flush() == ""
        assert not converter.pending

    def test_flush_renders_text_after_stuck_sequence(self, converter: AnsiToHtml) -> None:
        assert converter.convert("\x1b[é tail") == ""
        assert converter.flush() == "[é tail"
        assert not converter.pending

    def test_flush_keeps_style(self, converter: AnsiToHtml) -> None:
        converter.convert("\x1b[1m\x1b]8;;http://x")
        assert converter.flush() == '<span style="font-weight:bold">]8;;http://x</span>'


class TestStreamingEquivalence:
    @pytest.fixture()
    def expected(self) -> str:
        return AnsiToHtml().convert(STREAM)

    def test_expected_output(self, expected: str) -> None:
        assert expected == (
            "a&lt;b&gt; "
            '<span style="font-weight:bold;color:rgb(187,0,0)">R</span>'
            " &amp; "
            '<span style="color:rgb(255,0,0)">X</span>'
            '<span style="color:rgb(255,0,0);background-color:rgb(10,20,30)">Y</span>'
            " "
            '<a href="https://e.com">go</a>'
            " z!"
            '<span style="text-decoration:underline">_</span>'
        )

    def test_every_two_way_split(self, expected: str) -> None:
        for i in range(len(STREAM) + 1):
            conv = AnsiToHtml()
            out = conv.convert(STREAM[:i]) + conv.convert(STREAM[i:])
            assert out == expected, f"split at {i}"
            assert not conv.pending

    def test_split_inside_styled_run_gives_adjacent_spans(self) -> None:
        conv = AnsiToHtml()
        out = conv.convert("\x1b[1ma") + conv.convert("b")
        assert out == (
            '<span style="font-weight:bold">a</span>'
            '<span style="font-weight:bold">b</span>'
        )
        assert AnsiToHtml().convert("\x1b[1mab") == '<span style="font-weight:bold">ab</span>'

    def test_one_character_at_a_time(self, expected: str) -> None:
        conv = AnsiToHtml()
        assert "".join(conv.convert(ch) for ch in STREAM) == expected


def test_ansi_to_html_helper() -> None:
    assert ansi_to_html("\x1b[32mok\x1b[0m") == '<span style="color:rgb(0,187,0)">ok</span>'
    assert ansi_to_html("x\x1b[", ConverterConfig()) == "x["

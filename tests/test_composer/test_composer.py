"""Tests for the output composer."""
from __future__ import annotations

from css_unity.composer import MHTML_FOOTER, MHTML_HEADER, OutputComposer


class TestBlocks:
    def test_block_with_content_is_flushed(self):
        composer = OutputComposer()
        composer.open_block(".a {")
        composer.append("color: red;")
        assert composer.close_block("}") is True
        assert composer.parsed_text == ".a {\ncolor: red;\n}\n"

    def test_empty_block_vanishes(self):
        composer = OutputComposer()
        composer.append("@charset \"utf-8\";")
        composer.open_block(".a {")
        assert composer.close_block("}") is False
        assert composer.parsed_text == '@charset "utf-8";\n'

    def test_nested_empty_blocks_vanish(self):
        composer = OutputComposer()
        composer.open_block("@media screen {")
        composer.open_block(".a {")
        composer.close_block()
        composer.close_block()
        assert composer.parsed_text == ""
        assert composer.depth == 0

    def test_nested_block_keeps_parent(self):
        composer = OutputComposer()
        composer.open_block("@media screen {")
        composer.open_block(".a {")
        composer.extend(["color: red;", "margin: 0;"])
        composer.close_block()
        composer.close_block()
        assert composer.parsed_text == "@media screen {\n.a {\ncolor: red;\nmargin: 0;\n}\n}\n"

    def test_stray_close_is_kept(self):
        composer = OutputComposer()
        assert composer.close_block("}") is True
        assert composer.parsed_text == "}\n"

    def test_unclosed_block_flushed_at_end(self):
        composer = OutputComposer()
        composer.open_block(".a {")
        composer.append("color: red;")
        assert composer.render() == ".a {\ncolor: red;"


class TestMhtml:
    def test_render_without_mhtml(self):
        composer = OutputComposer(with_mhtml=False)
        composer.append("  a  ")
        composer.add_mhtml_part("a.png", "QQ==")
        assert composer.render() == "a"

    def test_render_with_parts(self):
        composer = OutputComposer(with_mhtml=True)
        composer.add_mhtml_part("a.png", "QQ==")
        composer.add_mhtml_part("img_b.png", "Qg==")
        composer.append("x")
        assert composer.mhtml_body == (
            "\n--|\nContent-Location:a.png\nContent-Transfer-Encoding:base64\n\nQQ==\n"
            "\n--|\nContent-Location:img_b.png\nContent-Transfer-Encoding:base64\n\nQg==\n"
        )
        assert composer.render() == (MHTML_HEADER + composer.mhtml_body + MHTML_FOOTER + "x").strip()

    def test_header_and_footer(self):
        assert MHTML_HEADER == '/*\nContent-Type: multipart/related; boundary="|"\n'
        assert MHTML_FOOTER == "\n--|--\n*/\n"

    def test_render_with_no_parts(self):
        composer = OutputComposer(with_mhtml=True)
        assert composer.render() == (
            '/*\nContent-Type: multipart/related; boundary="|"\n\n--|--\n*/'
        )

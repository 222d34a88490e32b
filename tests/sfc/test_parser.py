"""
Tests for sfc/parser.py — block boundaries, attributes and failures.
"""
import pytest

from core import SfcParseError
from sfc import parse
from sfc.parser import parse_attrs


SFC = (
    "<template>\n"          # line 1
    "  <div>{{ a < b }}</div>\n"
    "</template>\n"
    "\n"
    "<script>\n"            # line 5
    "export default {}\n"
    "</script>\n"
    "<script setup lang=\"ts\">\n"   # line 8
    "const x = 1\n"
    "</script>\n"
    "<style scoped>\n"      # line 11
    ".a { color: red; }\n"
    "</style>\n"
    "<style lang='scss'>\n"  # line 14
    ".b { .c { color: blue; } }\n"
    "</style>\n"
    "<i18n>\n"
    "{ \"en\": {} }\n"
    "</i18n>\n"
)


# ===========================================================
# Well-formed components
# ===========================================================

class TestParseBlocks:

    def test_all_blocks_found(self):
        d = parse(SFC)
        assert d.template is not None
        assert d.script is not None
        assert d.script_setup is not None
        assert len(d.styles) == 2
        assert [b.type for b in d.custom_blocks] == ["i18n"]

    def test_content_excludes_delimiters(self):
        d = parse(SFC)
        assert d.script.content == "\nexport default {}\n"
        assert d.script_setup.content == "\nconst x = 1\n"

    def test_lang_attribute(self):
        d = parse(SFC)
        assert d.script.lang is None
        assert d.script_setup.lang == "ts"
        assert d.styles[0].lang is None
        assert d.styles[1].lang == "scss"

    def test_setup_and_scoped_are_boolean_attrs(self):
        d = parse(SFC)
        assert d.script_setup.attrs["setup"] is True
        assert d.styles[0].attrs["scoped"] is True

    def test_locations_are_one_based(self):
        d = parse(SFC)
        assert d.template.tag_loc.start.line == 1
        assert d.template.tag_loc.start.column == 1
        assert d.template.tag_loc.end.line == 3
        assert d.script.tag_loc.start.line == 5
        assert d.script.tag_loc.end.line == 7
        assert d.styles[1].tag_loc.start.line == 14

    def test_content_offsets_match_source(self):
        d = parse(SFC)
        for block in (d.template, d.script, d.script_setup, *d.styles):
            assert SFC[block.loc.start.offset:block.loc.end.offset] == block.content

    def test_tag_loc_spans_delimiters(self):
        d = parse(SFC)
        assert d.script.tag_loc.source == "<script>\nexport default {}\n</script>"

    def test_nested_templates(self):
        text = "<template>\n<template v-if=\"ok\"><b>x</b></template>\n</template>\n"
        d = parse(text)
        assert d.template.content == "\n<template v-if=\"ok\"><b>x</b></template>\n"

    def test_void_and_self_closing_elements(self):
        text = "<template>\n<div><br><img src=\"a.png\"><my-comp /></div>\n</template>"
        assert parse(text).template is not None

    def test_attribute_values_may_contain_angle_brackets(self):
        text = "<template>\n<div :title=\"a > b ? '<' : '>'\">x</div>\n</template>"
        assert parse(text).template is not None

    def test_script_content_is_raw_text(self):
        text = "<script>\nconst s = '<div>'\nif (a < b) {}\n</script>"
        assert parse(text).script.content == "\nconst s = '<div>'\nif (a < b) {}\n"

    def test_non_html_template_is_raw(self):
        text = "<template lang=\"pug\">\ndiv\n  p hello\n</template>"
        assert parse(text).template.content == "\ndiv\n  p hello\n"

    def test_top_level_comments_are_skipped(self):
        text = "<!-- <script> not a block -->\n<script>\nx\n</script>"
        d = parse(text)
        assert d.script.content == "\nx\n"

    def test_empty_source(self):
        d = parse("")
        assert d.template is None and d.script is None and d.styles == []


# ===========================================================
# Failures
# ===========================================================

class TestParseErrors:

    @pytest.mark.parametrize("text", [
        "<template>\n<div>\n</template>\n",
        "<template>\n<div></span>\n</template>\n",
        "<template>\n<div>\n",
        "<script>\nconst a = 1\n",
        "<style>\n.a {}\n",
        "</template>\n",
        "<!-- never closed\n<template></template>",
        "<template>\n<!-- never closed\n</template>",
    ])
    def test_structural_errors(self, text):
        with pytest.raises(SfcParseError):
            parse(text)

    @pytest.mark.parametrize("text", [
        "<template></template>\n<template></template>",
        "<script></script>\n<script></script>",
        "<script setup></script>\n<script setup></script>",
    ])
    def test_duplicate_singletons(self, text):
        with pytest.raises(SfcParseError, match="only one"):
            parse(text)

    def test_error_carries_line(self):
        with pytest.raises(SfcParseError) as info:
            parse("\n\n<template>\n<div></span>\n</template>")
        assert info.value.line == 4


class TestParseAttrs:

    def test_quoting_styles(self):
        attrs = parse_attrs(' lang="ts" a=\'x\' b=y setup')
        assert attrs == {"lang": "ts", "a": "x", "b": "y", "setup": True}

    def test_names_are_lowercased(self):
        assert parse_attrs(" LANG=\"scss\"") == {"lang": "scss"}

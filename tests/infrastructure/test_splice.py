"""
Tests for infrastructure/splice.py — splicing and change detection.
"""
import pytest

from core import Document, LineSpan, OutcomeStatus, Region, RegionKind, SpliceMismatchError
from infrastructure import extract_regions, splice, synthesize


def _script(body="\nlet a = 1\n"):
    return extract_regions(Document(f"<script>{body}</script>\n"))[0]


class TestSplice:

    def test_replaces_payload_with_newline_and_output(self):
        region = _script("\nlet a   =  1\n")
        assert splice(region, "let a = 1\n") == "<script>\nlet a = 1\n</script>"

    def test_delimiters_and_attributes_untouched(self):
        region = extract_regions(Document('<script setup lang="ts">\nx\n</script>\n'))[0]
        assert splice(region, "y\n") == '<script setup lang="ts">\ny\n</script>'

    def test_uses_offsets_when_payload_repeats(self):
        # The payload "a" also occurs inside the opening tag's attribute
        text = '<style data-x="a">a</style>\n'
        region = extract_regions(Document(text))[0]
        assert region.raw_content == "a"
        assert splice(region, "b\n") == '<style data-x="a">\nb\n</style>'

    def test_textual_fallback_without_offsets(self):
        region = Region(
            kind=RegionKind.STYLE,
            language_tag=None,
            span=LineSpan(0, 0),
            raw_content=".a{}",
            full_text="<style>.a{}</style>",
        )
        assert splice(region, ".a {\n}\n") == "<style>\n.a {\n}\n</style>"

    def test_mismatch_without_offsets(self):
        region = Region(
            kind=RegionKind.SCRIPT,
            language_tag=None,
            span=LineSpan(0, 0),
            raw_content="missing",
            full_text="<script>x</script>",
        )
        with pytest.raises(SpliceMismatchError):
            splice(region, "y")

    def test_mismatch_with_wrong_offsets(self):
        region = Region(
            kind=RegionKind.SCRIPT,
            language_tag=None,
            span=LineSpan(0, 0),
            raw_content="x",
            full_text="<script>x</script>",
            content_start=0,
            content_end=1,
        )
        with pytest.raises(SpliceMismatchError):
            splice(region, "y")


class TestSynthesize:

    def test_changed(self):
        region = _script("\nlet a   =  1\n")
        outcome = synthesize(region, "let a = 1\n")
        assert outcome.status is OutcomeStatus.CHANGED
        assert outcome.replacement_text == "<script>\nlet a = 1\n</script>"

    def test_identical_output_is_unchanged(self):
        region = _script("\nlet a = 1\n")
        outcome = synthesize(region, "let a = 1\n")
        assert outcome.status is OutcomeStatus.UNCHANGED
        assert not outcome.changed

    def test_whitespace_difference_is_a_change(self):
        region = _script("\nlet a = 1\n")
        assert synthesize(region, "let a = 1\n\n").changed

    def test_empty_output_is_unchanged(self):
        assert synthesize(_script(), "").status is OutcomeStatus.UNCHANGED

    def test_none_output_is_failed(self):
        outcome = synthesize(_script(), None)
        assert outcome.status is OutcomeStatus.FAILED
        assert not outcome.changed

    def test_whole_span_output_is_not_spliced(self):
        region = extract_regions(Document("<template>\n<p>a</p>\n</template>\n"))[0]
        outcome = synthesize(region, "<template>\n    <p>a</p>\n</template>", splices_content=False)
        assert outcome.changed
        assert outcome.replacement_text == "<template>\n    <p>a</p>\n</template>"

    def test_whole_span_output_drops_trailing_newline(self):
        region = extract_regions(Document("<template>\n    <p>a</p>\n</template>\n"))[0]
        outcome = synthesize(region, "<template>\n    <p>a</p>\n</template>\n", splices_content=False)
        assert outcome.status is OutcomeStatus.UNCHANGED


class TestLineEndings:

    def test_output_uses_crlf_of_document(self):
        region = extract_regions(Document("<script>\r\nlet a   =  1\r\n</script>\r\n"))[0]
        assert region.eol == "\r\n"
        outcome = synthesize(region, "let a = 1\n")
        assert outcome.replacement_text == "<script>\r\nlet a = 1\r\n</script>"

    def test_crlf_document_already_formatted(self):
        region = extract_regions(Document("<script>\r\nlet a = 1\r\n</script>\r\n"))[0]
        assert synthesize(region, "let a = 1\n").status is OutcomeStatus.UNCHANGED

    def test_whole_span_output_uses_crlf(self):
        region = extract_regions(Document("<template>\r\n<p>a</p>\r\n</template>\r\n"))[0]
        outcome = synthesize(region, "<template>\n    <p>a</p>\n</template>\n", splices_content=False)
        assert outcome.replacement_text == "<template>\r\n    <p>a</p>\r\n</template>"

"""
Unit tests for early pipeline passes (p00, p10).
"""

import pytest

from camelcaser.core.context import TransformContext, TransformRequest
from camelcaser.core.errors import InputError
from camelcaser.ir.enums import InputKind
from camelcaser.passes.p00_prepare import prepare
from camelcaser.passes.p10_segment import segment, split_sentences


def _ctx(data) -> TransformContext:
    req = TransformRequest(data=data)
    return TransformContext.from_request(req)


class TestP00Prepare:
    """Tests for p00_prepare pass."""

    def test_bytes_pass_through(self):
        ctx = prepare(_ctx(b"Hello world."))

        assert ctx.data == b"Hello world."
        assert ctx.input_kind == InputKind.BYTES

    def test_bytearray_and_memoryview(self):
        assert prepare(_ctx(bytearray(b"abc"))).data == b"abc"
        assert prepare(_ctx(memoryview(b"abc"))).data == b"abc"

    def test_text_is_utf8_encoded(self):
        ctx = prepare(_ctx("café"))

        assert ctx.data == "café".encode("utf-8")
        assert ctx.input_kind == InputKind.TEXT

    def test_input_ends_at_nul(self):
        ctx = prepare(_ctx(b"abc\x00def"))

        assert ctx.data == b"abc"
        assert any(d.code == "INPUT_TRUNCATED" for d in ctx.diagnostics)

    def test_rejects_other_types(self):
        with pytest.raises(InputError):
            prepare(_ctx(42))

    def test_adds_trace(self):
        ctx = prepare(_ctx(b"Hello"))

        assert ctx.trace[0].pass_name == "p00_prepare"


class TestP10Segment:
    """Tests for p10_segment pass."""

    def _segment(self, data: bytes) -> TransformContext:
        ctx = _ctx(data)
        ctx.data = data
        return segment(ctx)

    def test_single_sentence(self):
        ctx = self._segment(b"The officer approached the vehicle")

        assert len(ctx.sentences) == 1
        assert ctx.sentences[0].raw == b"The officer approached the vehicle"
        assert ctx.sentences[0].terminated is False

    def test_punctuation_closes_sentence(self):
        ctx = self._segment(b"One. Two! Three?")

        assert [s.raw for s in ctx.sentences] == [b"One", b" Two", b" Three"]
        assert all(s.terminated for s in ctx.sentences)

    def test_consecutive_punctuation_yields_nothing(self):
        ctx = self._segment(b"Wait...what?!")

        assert [s.raw for s in ctx.sentences] == [b"Wait", b"what"]

    def test_whitespace_only_runs_are_dropped(self):
        ctx = self._segment(b"  .\t\n.  a  .   ")

        assert [s.raw for s in ctx.sentences] == [b"  a  "]

    def test_sentence_ids_are_sequential(self):
        ctx = self._segment(b"a. . b. c")

        assert [s.id for s in ctx.sentences] == ["sent_000", "sent_001", "sent_002"]

    def test_offsets_exclude_delimiter(self):
        data = b"Hello. World."
        ctx = self._segment(data)

        for sentence in ctx.sentences:
            assert data[sentence.start_byte:sentence.end_byte] == sentence.raw
            assert data[sentence.end_byte:sentence.end_byte + 1] == b"."

    def test_empty_input_adds_diagnostic(self):
        ctx = self._segment(b"")

        assert ctx.sentences == []
        assert ctx.diagnostics[0].code == "EMPTY_INPUT"

    def test_delimiters_only_adds_diagnostic(self):
        ctx = self._segment(b" ,;: ")

        assert ctx.sentences == []
        assert any(d.code == "NO_SENTENCES" for d in ctx.diagnostics)

    def test_other_bytes_do_not_delimit(self):
        ctx = self._segment(b"a\x01b\xffc 1 2")

        assert len(ctx.sentences) == 1


class TestSplitSentences:
    def test_always_ends_with_open_span(self):
        assert split_sentences(b"a.") == [(0, 1, True), (2, 2, False)]

    def test_empty(self):
        assert split_sentences(b"") == [(0, 0, False)]

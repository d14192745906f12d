"""
Tests for output validators.
"""

from camelcaser.core.context import TransformContext, TransformRequest
from camelcaser.passes import camel_case, prepare, segment, tokenize
from camelcaser.validate import (
    DelimiterValidator,
    IdempotenceValidator,
    PreservationValidator,
    default_validators,
)


def _built(data: bytes) -> TransformContext:
    ctx = TransformContext.from_request(TransformRequest(data=data))
    for pass_fn in (prepare, segment, tokenize, camel_case):
        ctx = pass_fn(ctx)
    return ctx


SAMPLE = b"The Heisenbug is an incredible creature. Facenovel servers\tget power."


class TestDelimiterValidator:
    def test_clean_tokens(self):
        assert DelimiterValidator().validate(_built(SAMPLE)) == []

    def test_detects_whitespace(self):
        ctx = _built(SAMPLE)
        ctx.sentences[0].token = b"the heisenbug"

        errors = DelimiterValidator().validate(ctx)

        assert len(errors) == 1
        assert "0x20" in errors[0]

    def test_detects_punctuation(self):
        ctx = _built(SAMPLE)
        ctx.sentences[1].token = b"facenovel."

        assert DelimiterValidator().validate(ctx)


class TestPreservationValidator:
    def test_clean_tokens(self):
        assert PreservationValidator().validate(_built(SAMPLE)) == []

    def test_detects_dropped_byte(self):
        ctx = _built(SAMPLE)
        ctx.sentences[0].token = ctx.sentences[0].token[:-1]

        assert PreservationValidator().validate(ctx)

    def test_detects_changed_non_letter(self):
        ctx = _built(b"caf\xc3\xa9 ok")
        ctx.sentences[0].token = b"caf\xc3\x89Ok"

        assert PreservationValidator().validate(ctx)


class TestIdempotenceValidator:
    def test_clean_tokens(self):
        assert IdempotenceValidator().validate(_built(SAMPLE)) == []

    def test_detects_uppercase_lead(self):
        ctx = _built(SAMPLE)
        ctx.sentences[0].token = b"TheHeisenbug"

        assert IdempotenceValidator().validate(ctx) == ["sent_000: token changes when re-cased"]


def test_default_validators_names():
    assert [v.name for v in default_validators()] == ["delimiters", "preservation", "idempotence"]

"""
Tests for IR models and serialization.
"""

import json

import pytest

from camelcaser.api import run
from camelcaser.ir.enums import InputKind, TransformStatus
from camelcaser.ir.serialization import from_json, to_json


class TestTransformResult:
    def test_tokens_in_sentence_order(self):
        result = run(b"c b a. b a. a")

        assert result.tokens == [b"cBA", b"bA", b"a"]

    def test_input_metadata(self):
        result = run("Hi there")

        assert result.input_kind == InputKind.TEXT
        assert result.input_bytes == len(b"Hi there")

    def test_words_link_to_sentences(self):
        result = run(b"one two. three")

        for sentence in result.sentences:
            assert all(w.sentence_id == sentence.id for w in sentence.words)


class TestSerialization:
    def test_bytes_survive_round_trip(self):
        result = run(b"na\xefve \xff\xfe approach. \x80done")

        restored = from_json(to_json(result))

        assert restored.tokens == result.tokens
        assert restored.sentences[0].words[1].raw == b"\xff\xfe"
        assert restored.status == TransformStatus.SUCCESS

    def test_bytes_are_base64_in_json(self):
        payload = json.loads(to_json(run(b"hi")))

        assert payload["sentences"][0]["token"] == "aGk="

    def test_incompatible_version_rejected(self):
        payload = json.loads(to_json(run(b"hi")))
        payload["version"] = "9.0.0"

        with pytest.raises(ValueError):
            from_json(json.dumps(payload))

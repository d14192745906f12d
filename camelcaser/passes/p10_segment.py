"""
Pass 10 — Sentence Segmentation

Splits prepared input into sentences. Every punctuation byte closes the
current sentence and is dropped; end of input closes the last one.
Runs holding nothing but whitespace produce no sentence.
"""

from camelcaser.charclass import PUNCTUATION_PATTERN, WHITESPACE_BYTES
from camelcaser.core.context import TransformContext
from camelcaser.core.logging import get_pass_logger
from camelcaser.ir.schema import Sentence

PASS_NAME = "p10_segment"
log = get_pass_logger(PASS_NAME)


def split_sentences(data: bytes) -> list[tuple[int, int, bool]]:
    """
    Return (start, end, terminated) for every candidate sentence.

    Candidates include whitespace-only and empty runs; callers drop those.
    """
    spans: list[tuple[int, int, bool]] = []
    start = 0
    for match in PUNCTUATION_PATTERN.finditer(data):
        spans.append((start, match.start(), True))
        start = match.end()
    spans.append((start, len(data), False))
    return spans


def segment(ctx: TransformContext) -> TransformContext:
    """
    Segment ctx.data into Sentence records.

    Offsets refer to ctx.data; the delimiter byte is outside [start, end).
    """
    data = ctx.data
    if not data:
        ctx.add_diagnostic(
            level="info",
            code="EMPTY_INPUT",
            message="Input is empty",
            source=PASS_NAME,
        )
        ctx.add_trace(pass_name=PASS_NAME, action="segmented_input", after="0 sentences")
        return ctx

    sentences: list[Sentence] = []
    dropped = 0
    for start, end, terminated in split_sentences(data):
        raw = data[start:end]
        if not raw.strip(WHITESPACE_BYTES):
            dropped += 1
            continue
        sentences.append(
            Sentence(
                id=f"sent_{len(sentences):03d}",
                start_byte=start,
                end_byte=end,
                raw=raw,
                terminated=terminated,
            )
        )

    if not sentences:
        ctx.add_diagnostic(
            level="info",
            code="NO_SENTENCES",
            message="Input holds only whitespace and punctuation",
            source=PASS_NAME,
        )

    log.verbose("segmented", sentences=len(sentences), empty_runs=dropped)

    ctx.sentences = sentences
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="segmented_input",
        after=f"{len(sentences)} sentences, {dropped} empty runs dropped",
        affected_ids=[s.id for s in sentences],
    )

    return ctx

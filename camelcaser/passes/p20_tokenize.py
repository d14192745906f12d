"""
Pass 20 — Word Tokenization

Splits each sentence into words at runs of whitespace and labels each
word with its case class. Whitespace never reaches the output.
"""

from camelcaser.charclass import WORD_PATTERN, is_letter, is_lower, is_upper
from camelcaser.core.context import TransformContext
from camelcaser.core.logging import get_pass_logger
from camelcaser.ir.enums import WordCase
from camelcaser.ir.schema import Word

PASS_NAME = "p20_tokenize"
log = get_pass_logger(PASS_NAME)


def classify_word_case(raw: bytes) -> WordCase:
    """
    Judge a word's case from its letter bytes only.

    Digits, high bytes and other non-letters neither count nor break the
    judgment.
    """
    has_upper = False
    has_lower = False
    for byte in raw:
        if not is_letter(byte):
            continue
        has_upper = has_upper or is_upper(byte)
        has_lower = has_lower or is_lower(byte)
        if has_upper and has_lower:
            return WordCase.MIXED
    if has_upper:
        return WordCase.UPPER
    if has_lower:
        return WordCase.LOWER
    return WordCase.NONE


def tokenize(ctx: TransformContext) -> TransformContext:
    """Populate Sentence.words for every sentence."""
    case_counts = {case: 0 for case in WordCase}

    for sentence in ctx.sentences:
        words: list[Word] = []
        for match in WORD_PATTERN.finditer(sentence.raw):
            raw = match.group(0)
            case = classify_word_case(raw)
            case_counts[case] += 1
            words.append(
                Word(
                    id=f"{sentence.id}_w{len(words):03d}",
                    sentence_id=sentence.id,
                    index=len(words),
                    start_byte=sentence.start_byte + match.start(),
                    end_byte=sentence.start_byte + match.end(),
                    raw=raw,
                    case=case,
                )
            )
        sentence.words = words
        log.debug("tokenized_sentence", sentence_id=sentence.id, words=len(words))

    total = sum(case_counts.values())
    log.verbose(
        "tokenized",
        words=total,
        **{f"{case.value}_words": n for case, n in case_counts.items()},
    )

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="tokenized_sentences",
        after=f"{total} words",
    )

    return ctx

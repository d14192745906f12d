"""
Pass 30 — camelCasing

Builds one token per sentence:
- first word: leading byte forced lowercase
- every later word: leading byte forced uppercase
- the leading byte is only changed when it is an ASCII letter
- every other byte is copied unchanged
- words are joined with no separator
"""

from camelcaser.charclass import is_letter, to_lower, to_upper
from camelcaser.core.context import TransformContext
from camelcaser.core.logging import get_pass_logger

PASS_NAME = "p30_camel_case"
log = get_pass_logger(PASS_NAME)


def camel_case_word(raw: bytes, first: bool) -> bytes:
    """
    Force the case of a word's leading byte if it is a letter.

    Only the first byte is considered: a word led by a digit or a high byte
    is left as is, so b"x 3rd" becomes b"x3rd", not b"x3Rd".
    """
    if not raw or not is_letter(raw[0]):
        return raw
    lead = to_lower(raw[0]) if first else to_upper(raw[0])
    return bytes([lead]) + raw[1:]


def camel_case(ctx: TransformContext) -> TransformContext:
    """Set Word.cased and Sentence.token for every sentence."""
    recased = 0

    for sentence in ctx.sentences:
        for word in sentence.words:
            word.cased = camel_case_word(word.raw, first=(word.index == 0))
            if word.cased != word.raw:
                recased += 1
                log.debug(
                    "word_recased",
                    word_id=word.id,
                    before=word.raw,
                    after=word.cased,
                )
        sentence.token = b"".join(word.cased for word in sentence.words)

    log.verbose("camel_cased", sentences=len(ctx.sentences), recased_words=recased)

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="built_tokens",
        after=f"{len(ctx.sentences)} tokens, {recased} words recased",
        affected_ids=[s.id for s in ctx.sentences],
    )

    return ctx

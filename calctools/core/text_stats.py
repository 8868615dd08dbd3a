"""Character, word and byte counts for a block of text."""

import re

from calctools.schemas.text_stats import TextStats, TextStatsRequest, TextStatsResponse

# whitespace as JavaScript defines it; unlike Python's \s this excludes \x1c-\x1f and \x85
_SPACE_CHARS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_WHITESPACE = re.compile(rf"[{_SPACE_CHARS}]")
_WHITESPACE_RUN = re.compile(rf"[{_SPACE_CHARS}]+")
_EDGE_WHITESPACE = re.compile(rf"^[{_SPACE_CHARS}]+|[{_SPACE_CHARS}]+\Z")
_SENTENCE_BREAK = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\n+")
_KOREAN = re.compile(r"[가-힣ㄱ-ㅎㅏ-ㅣ]")
_ENGLISH = re.compile(r"[a-zA-Z]")
_DIGIT = re.compile(r"[0-9]")

CHAR_CLASSES = ("korean_chars", "english_chars", "numbers", "spaces", "special")


def count_text(text: str) -> TextStats:
    """
    Count characters, words, sentences, paragraphs and UTF-8 bytes.

    Sentences and paragraphs count the non-empty pieces left after splitting
    on runs of ``.!?`` and on blank lines, so trailing whitespace after the
    last full stop counts as one more sentence. Characters are Unicode code
    points.
    """
    if not text:
        return TextStats()

    characters = len(text)
    korean = len(_KOREAN.findall(text))
    english = len(_ENGLISH.findall(text))
    numbers = len(_DIGIT.findall(text))
    spaces = len(_WHITESPACE.findall(text))
    stripped = _EDGE_WHITESPACE.sub("", text)

    return TextStats(
        characters=characters,
        characters_no_spaces=characters - spaces,
        words=len(_WHITESPACE_RUN.split(stripped)) if stripped else 0,
        sentences=len([piece for piece in _SENTENCE_BREAK.split(text) if piece]),
        paragraphs=len([piece for piece in _PARAGRAPH_BREAK.split(text) if piece]),
        bytes=len(text.encode("utf-8")),
        korean_chars=korean,
        english_chars=english,
        numbers=numbers,
        spaces=spaces,
        special=characters - korean - english - numbers - spaces,
    )


def char_type_percentage(count: int, stats: TextStats) -> float:
    """Share of ``count`` in all characters, in percent."""
    if stats.characters == 0:
        return 0.0
    return count / stats.characters * 100


def char_type_breakdown(stats: TextStats) -> dict:
    return {name: char_type_percentage(getattr(stats, name), stats) for name in CHAR_CLASSES}


def calculate_text_stats(request: TextStatsRequest) -> TextStatsResponse:
    stats = count_text(request.text)
    return TextStatsResponse(stats=stats, percentages=char_type_breakdown(stats))

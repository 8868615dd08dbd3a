"""Data contracts for the character counter."""

from typing import Dict

from pydantic import BaseModel, ConfigDict


class TextStatsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = ""


class TextStats(BaseModel):
    characters: int = 0
    characters_no_spaces: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    bytes: int = 0
    korean_chars: int = 0
    english_chars: int = 0
    numbers: int = 0
    spaces: int = 0
    special: int = 0


class TextStatsResponse(BaseModel):
    stats: TextStats
    # share of all characters per character class, in percent
    percentages: Dict[str, float]

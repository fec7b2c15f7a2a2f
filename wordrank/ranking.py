from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

TOP_N = 10


@dataclass(slots=True)
class RankedEntry:
    word: str
    total: int

    def to_dict(self) -> dict[str, object]:
        return {"word": self.word, "total": self.total}


class WordFrequencyRanker:
    """
    Counts space/newline-delimited tokens and ranks them by frequency.

    Tokens are compared exactly, so "Go" and "go", or "cc." and "cc", are
    different words. Equal counts keep first-seen order.

    The cut keeps ``min(limit, distinct - 1)`` entries: the least frequent
    candidate is always dropped, even when fewer than ``limit`` words exist.
    """

    def __init__(self, limit: int = TOP_N) -> None:
        self.limit = max(0, int(limit))

    @staticmethod
    def tokenize(text: str) -> list[str]:
        tokens: list[str] = []
        for line in text.split("\n"):
            for word in line.split(" "):
                if not word or word[0] == "\n":
                    continue
                tokens.append(word)
        return tokens

    def frequency_table(self, text: str) -> Counter[str]:
        return Counter(self.tokenize(text))

    def rank(self, text: str) -> tuple[list[RankedEntry], int]:
        counts = self.frequency_table(text)
        ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)

        keep = min(self.limit, max(0, len(ordered) - 1))
        entries = [RankedEntry(word=word, total=total) for word, total in ordered[:keep]]
        return entries, len(entries)

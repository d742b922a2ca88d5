"""Random row content. One PayloadSource per worker, never shared."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from dbsizegen.config import table_name
from dbsizegen.words import ADJECTIVES, LOREM_IPSUM, NOUNS


def fixed_text(length: int, tag: str) -> str:
    if length <= 0:
        return ""
    return (tag * ((length // max(1, len(tag))) + 1))[:length]


@dataclass(frozen=True)
class RowPayload:
    name: str
    height: int
    weight: int
    age: int
    description: str

    def as_params(self) -> Tuple[str, int, int, int, str]:
        return (self.name, self.height, self.weight, self.age, self.description)


class PayloadSource:
    def __init__(self, tables: int, description_len: int, seed: Optional[int] = None):
        self.tables = tables
        self.description_len = max(0, description_len)
        self.rng = np.random.default_rng(seed)
        # long enough that any window of description_len starting inside
        # the first copy of the text is complete
        self._text = fixed_text(self.description_len + len(LOREM_IPSUM), LOREM_IPSUM)

    def pick_table(self) -> str:
        return table_name(int(self.rng.integers(0, self.tables)))

    def name(self) -> str:
        adj = ADJECTIVES[int(self.rng.integers(0, len(ADJECTIVES)))]
        noun = NOUNS[int(self.rng.integers(0, len(NOUNS)))]
        return f"{adj.title()} {noun.title()}"

    def description(self) -> str:
        start = int(self.rng.integers(0, len(LOREM_IPSUM)))
        return self._text[start : start + self.description_len]

    def row(self) -> RowPayload:
        height, weight, age = self.rng.integers((120, 30, 10), (201, 231, 111))
        return RowPayload(
            name=self.name(),
            height=int(height),
            weight=int(weight),
            age=int(age),
            description=self.description(),
        )

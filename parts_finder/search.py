from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rapidfuzz import fuzz, process

from .catalog_parser import PartRecord


@dataclass(frozen=True)
class SearchOptions:
    threshold: float = 0.4
    min_match_length: int = 2
    keys: tuple[str, ...] = ("item_no", "item_description")


@dataclass(frozen=True)
class SearchHit:
    record: PartRecord
    score: float


class SearchIndex:
    """Fuzzy index over the catalog, rebuilt whole whenever the catalog changes.

    Scores follow the Fuse convention: 0.0 is a perfect match and a candidate
    is kept while its score stays at or below ``options.threshold``. A value at
    least as long as the query is scored on its best-aligned substring; a
    shorter value is scored as a whole, so it cannot win just by appearing
    inside the query.
    """

    def __init__(self, records: Sequence[PartRecord], options: SearchOptions | None = None) -> None:
        self.options = options or SearchOptions()
        self.records = list(records)
        self._choices: dict[str, list[str]] = {
            key: [str(getattr(record, key, "")).casefold() for record in self.records]
            for key in self.options.keys
        }
        self._by_item_no: dict[str, PartRecord] = {}
        for record in self.records:
            if record.item_no:
                self._by_item_no.setdefault(record.item_no.casefold(), record)

    def __len__(self) -> int:
        return len(self.records)

    def exact_match(self, text: str) -> PartRecord | None:
        return self._by_item_no.get(text.strip().casefold())

    def search(self, text: str) -> list[SearchHit]:
        needle = text.strip().casefold()
        if len(needle) < self.options.min_match_length or not self.records:
            return []
        cutoff = max(0.0, (1.0 - self.options.threshold) * 100.0)
        best: dict[int, float] = {}
        for choices in self._choices.values():
            for idx, similarity in self._score(needle, choices, cutoff):
                if similarity > best.get(idx, -1.0):
                    best[idx] = similarity
        ranked = sorted(best.items(), key=lambda pair: (-pair[1], pair[0]))
        return [SearchHit(record=self.records[idx], score=round(1.0 - similarity / 100.0, 4)) for idx, similarity in ranked]

    def _score(self, needle: str, choices: list[str], cutoff: float) -> list[tuple[int, float]]:
        scored: list[tuple[int, float]] = []
        for scorer, scores_longer in ((fuzz.partial_ratio, True), (fuzz.ratio, False)):
            matches = process.extract(
                needle,
                choices,
                scorer=scorer,
                processor=None,
                score_cutoff=cutoff,
                limit=None,
            )
            scored.extend(
                (idx, similarity)
                for _choice, similarity, idx in matches
                if (len(choices[idx]) >= len(needle)) == scores_longer
            )
        return scored

    def query(self, text: str) -> list[PartRecord] | None:
        trimmed = (text or "").strip()
        if not trimmed:
            return None
        exact = self.exact_match(trimmed)
        if exact is not None:
            return [exact]
        return [hit.record for hit in self.search(trimmed)]


def build_index(records: Sequence[PartRecord], options: SearchOptions | None = None) -> SearchIndex:
    return SearchIndex(records, options)


def query(index: SearchIndex | None, text: str) -> list[PartRecord] | None:
    if not (text or "").strip():
        return None
    if index is None:
        return []
    return index.query(text)

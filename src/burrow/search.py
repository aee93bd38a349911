"""Type-to-select fuzzy search over the current listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from rapidfuzz import fuzz, process, utils


@dataclass(frozen=True)
class Match:
    """A candidate that matched a query."""

    index: int
    text: str
    score: float
    positions: list[int]


def match_positions(query: str, text: str) -> list[int] | None:
    """Find the query as a case-insensitive subsequence of text.

    Returns:
        Indexes of the matched characters in ``text``, or None if some query
        character could not be matched.
    """
    positions: list[int] = []
    start = 0
    for wanted in query.lower():
        for i in range(start, len(text)):
            if text[i].lower() == wanted:
                positions.append(i)
                start = i + 1
                break
        else:
            return None
    return positions


def find(query: str, candidates: Sequence[str]) -> list[Match]:
    """Rank the candidates that contain the query as a subsequence.

    Candidates are ordered by rapidfuzz's WRatio score, best first; equal
    scores keep listing order, so the same input always gives the same ranking.
    """
    if not query:
        return []

    positions: dict[int, list[int]] = {}
    for index, text in enumerate(candidates):
        found = match_positions(query, text)
        if found is not None:
            positions[index] = found
    if not positions:
        return []

    scored = process.extract(
        query,
        {index: candidates[index] for index in positions},
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=None,
    )
    # Punctuation-only queries process to nothing and may go unscored
    scores = {index: score for _, score, index in scored}
    ranked = sorted(positions, key=lambda index: (-scores.get(index, 0.0), index))
    return [
        Match(
            index=index,
            text=candidates[index],
            score=scores.get(index, 0.0),
            positions=positions[index],
        )
        for index in ranked
    ]


@dataclass
class SearchState:
    """Query and session bookkeeping for type-to-select.

    Every activation starts a new session, and every query edit within it is a
    new keystroke. Deferred expiry events carry the session id and keystroke
    they were created for and are ignored once either has moved on.
    """

    query: str = ""
    session_id: int = 0
    keystroke: int = 0
    matched_indexes: list[int] = field(default_factory=list)
    active: bool = False

    def start(self) -> None:
        """Activate search with an empty query in a new session."""
        self.active = True
        self.session_id += 1
        self.keystroke = 0
        self.query = ""
        self.matched_indexes = []

    def stop(self) -> None:
        """Deactivate search; the cursor stays where the query put it."""
        self.active = False

    def expire(self, session_id: int, keystroke: int) -> bool:
        """Deactivate if no newer session or keystroke has come since."""
        if session_id != self.session_id or keystroke != self.keystroke:
            return False
        self.active = False
        return True

    def append(self, text: str, names: Sequence[str]) -> int | None:
        """Extend the query and return the index of the best match."""
        self.query += text
        self.keystroke += 1
        return self._match(names)

    def backspace(self, names: Sequence[str]) -> int | None:
        """Drop the last query character and return the best match index.

        An empty query matches nothing, leaving the cursor in place.
        """
        self.query = self.query[:-1]
        self.keystroke += 1
        return self._match(names)

    def _match(self, names: Sequence[str]) -> int | None:
        matches = find(self.query, names)
        if not matches:
            self.matched_indexes = []
            return None
        best = matches[0]
        self.matched_indexes = best.positions
        return best.index

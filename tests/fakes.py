"""
Deterministic stand-ins for the entropy sources and the lookup backend.
"""

from typing import Iterable, List, Sequence

from shortener_core.lookup.strategies import CodeLookup
from shortener_core.sources.strategies import IdSource, WordSource


class ScriptedWordSource(WordSource):
    """Returns pre-set word batches in order, repeating the last one"""

    def __init__(self, batches: Sequence[List[str]]):
        self.batches = list(batches)
        self.calls = 0

    def draw_words(self, count: int) -> List[str]:
        batch = self.batches[min(self.calls, len(self.batches) - 1)]
        self.calls += 1
        return list(batch[:count])


class ScriptedIdSource(IdSource):
    """Returns pre-set tokens in order, repeating the last one"""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
        self.calls = 0

    def draw_token(self) -> str:
        token = self.tokens[min(self.calls, len(self.tokens) - 1)]
        self.calls += 1
        return token


class ScriptedLookup(CodeLookup):
    """Answers `exists` from a list of results, then `default`; records calls"""

    def __init__(self, results: Iterable[bool] = (), default: bool = False):
        self.results = list(results)
        self.default = default
        self.calls: List[str] = []

    async def exists(self, code: str) -> bool:
        self.calls.append(code)
        if self.results:
            return self.results.pop(0)
        return self.default


class FailingLookup(CodeLookup):
    """Lookup whose backend is always down"""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def exists(self, code: str) -> bool:
        self.calls += 1
        raise self.error


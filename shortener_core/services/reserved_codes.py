"""
Registry of codes that collide with top-level application routes.
"""

from typing import FrozenSet, Iterable, Optional
from shortener_core.config import settings


class ReservedCodeRegistry:
    """Read-only set of codes that may never be handed out"""

    def __init__(self, codes: Iterable[str]):
        self._codes: FrozenSet[str] = frozenset(codes)

    def is_reserved(self, code: str) -> bool:
        """Exact, case-sensitive membership test"""
        return code in self._codes

    def __contains__(self, code: str) -> bool:
        return self.is_reserved(code)

    def __len__(self) -> int:
        return len(self._codes)

    @property
    def codes(self) -> FrozenSet[str]:
        return self._codes


_default_registry: Optional[ReservedCodeRegistry] = None


def get_reserved_registry() -> ReservedCodeRegistry:
    """Registry built once from settings on first use"""
    global _default_registry
    if _default_registry is None:
        _default_registry = ReservedCodeRegistry(settings.reserved_codes)
    return _default_registry


def is_reserved(code: str) -> bool:
    return get_reserved_registry().is_reserved(code)

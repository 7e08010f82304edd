"""Abstract base for all narration providers."""

from __future__ import annotations

import abc
from typing import FrozenSet

from ...domain.models.narration import NarrationKind, NarrationRequest, NarrationResult, NarrationSource


class NarrationProvider(abc.ABC):
    """
    Contract that every narration provider must implement.

    try_generate() returns a result or raises ProviderError; it never returns
    an empty result.
    """

    name: str = "base"
    source: NarrationSource = NarrationSource.LOCAL
    kinds: FrozenSet[NarrationKind] = frozenset(NarrationKind)

    def is_available(self) -> bool:
        return True

    def supports(self, kind: NarrationKind) -> bool:
        return kind in self.kinds

    @abc.abstractmethod
    async def try_generate(
        self,
        request: NarrationRequest,
        *,
        timeout_seconds: float = 8.0,
    ) -> NarrationResult:
        """Produce narration for *request* or raise ``ProviderError``."""

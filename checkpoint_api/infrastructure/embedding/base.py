"""Abstract interface for text embedding providers."""

from abc import ABC, abstractmethod
from typing import List


class EmbeddingProvider(ABC):
    """Turns text into a vector that can be compared with stored checkpoint embeddings.

    The checkpoint search never derives meaning from text itself; callers that
    want semantic ordering ask a provider for a query vector first.
    """

    model_name: str

    @abstractmethod
    async def embed_text(self, text: str) -> List[float]:
        """Return the embedding for a single non-empty text."""
        pass

    @property
    @abstractmethod
    def embedding_dimension(self) -> int | None:
        """Vector length produced by the provider, or None if not known yet."""
        pass

    @abstractmethod
    async def is_loaded(self) -> bool:
        """Whether the underlying model is ready to serve requests."""
        pass

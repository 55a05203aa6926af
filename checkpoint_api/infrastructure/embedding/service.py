"""Sentence-transformers embedding provider."""

import asyncio
from functools import lru_cache
from typing import List, Optional, cast

from sentence_transformers import SentenceTransformer

from ..config.settings import get_settings
from ..logging import get_logger
from .base import EmbeddingProvider

logger = get_logger(__name__)


class SentenceTransformerEmbeddingProvider(EmbeddingProvider):
    """Embedding provider backed by a sentence-transformers model.

    The model is loaded lazily on first use, once per process, and inference
    runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, model_name: str, normalize: bool = True):
        """Initialize the provider.

        Args:
            model_name: HuggingFace model name for sentence transformers
            normalize: Whether to L2-normalize the produced vectors
        """
        self.model_name = model_name
        self.normalize = normalize
        self._model: Optional[SentenceTransformer] = None
        self._model_lock = asyncio.Lock()

    async def _get_model(self) -> SentenceTransformer:
        """Get the model instance, loading it if necessary."""
        if self._model is None:
            async with self._model_lock:
                if self._model is None:
                    logger.info("Loading embedding model", extra={"model_name": self.model_name})
                    self._model = cast(SentenceTransformer, await asyncio.to_thread(SentenceTransformer, self.model_name))
        if self._model is None:
            raise RuntimeError("Model failed to load")
        return self._model

    async def embed_text(self, text: str) -> List[float]:
        """Generate the embedding for a single text.

        Raises:
            ValueError: If the text is empty or whitespace only
        """
        if not text.strip():
            raise ValueError("Text cannot be empty")

        model = await self._get_model()

        embedding = await asyncio.to_thread(
            model.encode,
            text,
            convert_to_tensor=False,
            normalize_embeddings=self.normalize,
        )

        return [float(value) for value in embedding]

    @property
    def embedding_dimension(self) -> int | None:
        if self._model is None:
            return None
        return self._model.get_sentence_embedding_dimension()

    async def is_loaded(self) -> bool:
        return self._model is not None


@lru_cache()
def get_embedding_provider() -> EmbeddingProvider:
    """Get the process-wide embedding provider configured in settings."""
    settings = get_settings()
    return SentenceTransformerEmbeddingProvider(
        model_name=settings.EMBEDDING_MODEL_NAME,
        normalize=settings.EMBEDDING_NORMALIZE,
    )

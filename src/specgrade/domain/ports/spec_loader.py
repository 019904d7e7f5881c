"""Port: Spec loader — turn an API description on disk into a Document."""

from abc import ABC, abstractmethod
from pathlib import Path

from specgrade.domain.models.document import Document


class SpecLoaderPort(ABC):
    """Contract for loading a fully reference-resolved ``Document``.

    Implementations must raise ``SpecLoadError`` for anything that keeps
    them from producing a structurally valid document, before the engine
    ever sees it.
    """

    @abstractmethod
    def load(self, target: Path) -> Document:
        """Load the API description at *target* (a file or a directory)."""
        ...

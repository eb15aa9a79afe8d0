"""Access to the solution file the user is editing."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..client.models import Document


logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    """Provides the currently active document, if any."""

    @abstractmethod
    def active_document(self) -> Optional[Document]:
        """Return a fresh snapshot of the active document, or None."""


class FileDocumentSource(DocumentSource):
    """
    Treats one file on disk as the active document.
    The file is read each time active_document() is called, so every
    call returns a fresh snapshot.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None

    def open(self, path: Union[str, Path]) -> None:
        """Make another file the active document."""
        self.path = Path(path)

    def active_document(self) -> Optional[Document]:
        if self.path is None or not self.path.is_file():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", self.path, e)
            return None
        return Document(path=str(self.path), text=text)

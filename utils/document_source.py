import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from models.config import DocumentQuery
from utils.exceptions import DocumentSourceError
from utils.logger import setup_logger

logger = setup_logger(__name__)

# Keys under which content store exports wrap their document list
WRAPPER_KEYS = ("documents", "result")
SEARCH_FIELDS = ("title", "name")


class DocumentSource(ABC):
    """Base class for anything that can supply documents to an extraction run."""

    @abstractmethod
    def fetch(self, query: DocumentQuery) -> List[Dict[str, Any]]:
        """
        Fetch the documents matching a query.

        Args:
            query: Description of the documents to fetch

        Returns:
            Matching documents, in a stable order for one call

        Raises:
            DocumentSourceError: If the documents cannot be fetched
        """
        pass


class InMemoryDocumentSource(DocumentSource):
    """Serves documents that are already loaded, applying the query locally."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents

    def fetch(self, query: DocumentQuery) -> List[Dict[str, Any]]:
        if query.custom_query:
            raise DocumentSourceError(
                "Custom queries cannot be evaluated locally.", details=query.custom_query)
        matches = [doc for doc in self.documents if self._matches(doc, query)]
        return matches[:query.limit]

    @staticmethod
    def _matches(document: Any, query: DocumentQuery) -> bool:
        if not isinstance(document, dict):
            # Malformed entries are passed through for the analyzer to report
            return True
        if query.document_type:
            if document.get("_type") != query.document_type:
                return False
        elif not document.get("_type"):
            return False
        if query.search:
            needle = query.search.lower()
            return any(
                isinstance(document.get(key), str) and needle in document[key].lower()
                for key in SEARCH_FIELDS
            )
        return True


class JsonDocumentSource(InMemoryDocumentSource):
    """
    Reads documents from a JSON export file.

    Accepts a JSON array, an object wrapping the array under "documents"
    or "result", or newline-delimited JSON with one document per line.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__([])

    def fetch(self, query: DocumentQuery) -> List[Dict[str, Any]]:
        logger.info(f"Fetching documents matching {query.to_groq()} from {self.path}")
        self.documents = self._load()
        documents = super().fetch(query)
        logger.info(f"Fetched {len(documents)} of {len(self.documents)} documents from {self.path}")
        return documents

    def _load(self) -> List[Any]:
        try:
            text = self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise DocumentSourceError(f"Cannot read documents from {self.path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = self._load_lines(text)

        if isinstance(data, dict):
            for key in WRAPPER_KEYS:
                if isinstance(data.get(key), list):
                    return data[key]
            # A single document
            return [data]
        if isinstance(data, list):
            return data
        raise DocumentSourceError(f"Expected a list of documents in {self.path}")

    def _load_lines(self, text: str) -> List[Any]:
        documents = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                documents.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise DocumentSourceError(
                    f"Invalid JSON in {self.path} at line {line_number}: {e}") from e
        return documents

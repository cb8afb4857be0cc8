"""
GS1 Web Vocabulary JSON-LD Mapper

Serializes master data (parties, locations, trade items) into GS1 Web
Vocabulary JSON-LD and reads it back. Predicate terms are compacted and
expanded with the namespaces declared in the document's own @context.

Objects without a context are written with the default GS1 context
(cbvmda, xsd, gs1, @vocab, gdst).
"""

import json
import logging
from typing import Any, Type

from masterdata.context import default_context, reverse_namespaces, scrape_namespaces
from masterdata.errors import MappingError, MissingContextError
from masterdata.jsonld_mapper import from_json, to_json
from masterdata.models import VocabularyElement
from utility.config import JSONLD_INDENT

logger = logging.getLogger(__name__)


class GS1VocabJsonMapper:
    """Maps VocabularyElement objects to and from GS1 Web Vocab JSON-LD text."""

    def __init__(self, indent: int = JSONLD_INDENT):
        self.indent = indent

    @staticmethod
    def effective_context(vocab: VocabularyElement) -> Any:
        """Return the object's own context, or a fresh default context if it has none."""
        if vocab.context is not None:
            return vocab.context
        return default_context()

    def map(self, vocab: VocabularyElement) -> str:
        """
        Serialize a vocabulary object into a JSON-LD document.

        If vocab.context is unset, the default context is assigned to it as
        part of this call, so the caller's object reflects the context the
        document was written with.

        Args:
            vocab: Object to serialize

        Returns:
            JSON-LD document text including @context

        Raises:
            MappingError: If the object does not map to a JSON object
        """
        context = self.effective_context(vocab)
        if vocab.context is None:
            vocab.context = context

        namespaces = scrape_namespaces(context)
        json_obj = to_json(vocab, reverse_namespaces(namespaces))
        if not isinstance(json_obj, dict):
            logger.error(f"Failed to map {type(vocab).__name__} into GS1 web vocab")
            raise MappingError("Failed to map master data into GS1 web vocab.")

        json_obj["@context"] = context
        return json.dumps(json_obj, indent=self.indent, ensure_ascii=False)

    def parse(self, cls: Type[VocabularyElement], value: str) -> VocabularyElement:
        """
        Deserialize a JSON-LD document into a vocabulary object.

        Args:
            cls: VocabularyElement subclass to build
            value: JSON-LD document text

        Returns:
            Instance of cls with context set to the document's @context

        Raises:
            MappingError: If the text is not a JSON object
            MissingContextError: If the document has no @context
        """
        try:
            json_obj = json.loads(value)
        except (TypeError, json.JSONDecodeError) as e:
            logger.error(f"GS1 web vocab document is not valid JSON: {e}")
            raise MappingError(f"GS1 web vocab document is not valid JSON: {e}") from e

        if not isinstance(json_obj, dict):
            logger.error("GS1 web vocab document is not a JSON object")
            raise MappingError("GS1 web vocab document must be a JSON object.")

        context = json_obj.get("@context")
        if context is None:
            logger.error("@context is missing on GS1 web vocab document")
            raise MissingContextError(
                f"@context is null on the JSON-LD when deserializing GS1 Web Vocab. {value}"
            )

        obj = from_json(json_obj, cls, scrape_namespaces(context))
        obj.context = context
        return obj

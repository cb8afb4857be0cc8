"""
JSON-LD Structural Mapper

Walks a VocabularyElement's jsonld_field() bindings to produce a compacted
JSON-LD object, and reverses the process for a parsed JSON-LD object.

This layer knows nothing about @context documents: callers hand it the
already-resolved namespace tables (see masterdata.context).
"""

import logging
import typing
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from gs1.pgln import PGLN
from masterdata.context import compact_uri, expand_term
from masterdata.errors import MappingError
from masterdata.models import JSONLD_PREDICATE, VocabularyElement

logger = logging.getLogger(__name__)

TYPE_KEYWORD = "@type"


@lru_cache(maxsize=None)
def predicate_bindings(cls: Type[VocabularyElement]) -> Dict[str, str]:
    """Return field name -> predicate for every JSON-LD bound field of a model."""
    bindings: Dict[str, str] = {}
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra
        if isinstance(extra, dict) and JSONLD_PREDICATE in extra:
            bindings[name] = extra[JSONLD_PREDICATE]
    return bindings


def _vocab_type(annotation: Any) -> Optional[Type[VocabularyElement]]:
    """Find the VocabularyElement class inside Optional[...] / List[...] annotations."""
    if isinstance(annotation, type) and issubclass(annotation, VocabularyElement):
        return annotation
    for arg in typing.get_args(annotation):
        found = _vocab_type(arg)
        if found is not None:
            return found
    return None


def _to_value(value: Any, reverse: Mapping[str, str]) -> Any:
    if isinstance(value, VocabularyElement):
        return to_json(value, reverse)
    if isinstance(value, (list, tuple)):
        return [_to_value(v, reverse) for v in value]
    if isinstance(value, PGLN):
        return str(value)
    return value


def to_json(obj: Any, reverse: Mapping[str, str]) -> Any:
    """
    Convert a vocabulary object into a compacted JSON-LD value.

    Args:
        obj: VocabularyElement (other values are converted as plain JSON values)
        reverse: Namespace URI -> prefix table used for compaction

    Returns:
        dict for vocabulary objects; None and empty list attributes are omitted.
        @type values are absolute URIs on the model and compacted like predicates.
    """
    if not isinstance(obj, VocabularyElement):
        return _to_value(obj, reverse)

    json_obj: Dict[str, Any] = {}
    for name, predicate in predicate_bindings(type(obj)).items():
        value = getattr(obj, name)
        if value is None or (isinstance(value, list) and not value):
            continue
        if predicate == TYPE_KEYWORD and isinstance(value, str):
            json_obj[predicate] = compact_uri(value, reverse)
            continue
        json_obj[compact_uri(predicate, reverse)] = _to_value(value, reverse)
    return json_obj


def _from_value(value: Any, vocab_cls: Optional[Type[VocabularyElement]], namespaces: Mapping[str, str]) -> Any:
    if vocab_cls is None:
        return value
    if isinstance(value, dict):
        return from_json(value, vocab_cls, namespaces)
    if isinstance(value, list):
        return [_from_value(v, vocab_cls, namespaces) for v in value]
    return value


def from_json(json_obj: Mapping[str, Any], cls: Type[VocabularyElement], namespaces: Mapping[str, str]) -> VocabularyElement:
    """
    Build a vocabulary object from a compacted JSON-LD object.

    Args:
        json_obj: Parsed JSON-LD object
        cls: VocabularyElement subclass to build
        namespaces: Prefix -> namespace URI table used for expansion

    Returns:
        Instance of cls; keys bound to no attribute are ignored

    Raises:
        MappingError: If the values do not validate against the model
    """
    if not (isinstance(cls, type) and issubclass(cls, VocabularyElement)):
        raise TypeError(f"{cls!r} is not a VocabularyElement type")

    by_predicate = {predicate: name for name, predicate in predicate_bindings(cls).items()}

    data: Dict[str, Any] = {}
    for key, value in json_obj.items():
        predicate = expand_term(key, namespaces)
        name = by_predicate.get(predicate)
        if name is None:
            continue
        if predicate == TYPE_KEYWORD and isinstance(value, str):
            data[name] = expand_term(value, namespaces)
            continue
        vocab_cls = _vocab_type(cls.model_fields[name].annotation)
        data[name] = _from_value(value, vocab_cls, namespaces)

    try:
        return cls.model_validate(data)
    except ValidationError as e:
        logger.error(f"Failed to map JSON-LD into {cls.__name__}: {e}")
        raise MappingError(f"Failed to map JSON-LD into {cls.__name__}: {e}") from e

"""
JSON-LD Context Namespaces

Turns a JSON-LD @context into a prefix -> namespace URI table and uses that
table to compact absolute predicate URIs into prefixed terms (writing) or
expand prefixed terms back into absolute URIs (reading).

A context is either a single term-map object or an array of them. When the
same prefix (or, for the reverse table, the same URI) is declared twice, the
first declaration wins.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping

VOCAB_KEYWORD = "@vocab"

DEFAULT_CONTEXT: Mapping[str, str] = MappingProxyType({
    "cbvmda": "urn:epcglobal:cbvmda:mda",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "gs1": "http://gs1.org/voc/",
    "@vocab": "http://gs1.org/voc/",
    "gdst": "https://traceability-dialogue.org/vocab",
})


def default_context() -> Dict[str, str]:
    """Return a fresh, caller-owned copy of the default GS1 Web Vocab context."""
    return dict(DEFAULT_CONTEXT)


def _scrape_object(term_map: Mapping[str, Any]) -> Dict[str, str]:
    return {prefix: uri for prefix, uri in term_map.items() if isinstance(uri, str)}


def scrape_namespaces(context: Any) -> Dict[str, str]:
    """
    Extract prefix -> URI bindings from a JSON-LD context.

    Args:
        context: Term-map dict, list of term-map dicts, or None

    Returns:
        Ordered dict of prefix -> namespace URI

    Example:
        >>> scrape_namespaces([{"a": "urn:x"}, {"a": "urn:y"}, "ignored"])
        {'a': 'urn:x'}
    """
    namespaces: Dict[str, str] = {}

    if isinstance(context, Mapping):
        namespaces = _scrape_object(context)
    elif isinstance(context, list):
        for entry in context:
            if not isinstance(entry, Mapping):
                continue
            for prefix, uri in _scrape_object(entry).items():
                namespaces.setdefault(prefix, uri)

    return namespaces


def reverse_namespaces(namespaces: Mapping[str, str]) -> Dict[str, str]:
    """
    Build the URI -> prefix table used for compaction.

    Example:
        >>> reverse_namespaces({"gs1": "http://gs1.org/voc/", "@vocab": "http://gs1.org/voc/"})
        {'http://gs1.org/voc/': 'gs1'}
    """
    reverse: Dict[str, str] = {}
    for prefix, uri in namespaces.items():
        reverse.setdefault(uri, prefix)
    return reverse


def compact_uri(uri: str, reverse: Mapping[str, str]) -> str:
    """
    Compact an absolute URI into a prefixed term.

    The longest matching namespace is used. A namespace bound to @vocab
    compacts to the bare local name. URIs without a matching namespace are
    returned unchanged.

    Example:
        >>> compact_uri("http://gs1.org/voc/example", {"http://gs1.org/voc/": "gs1"})
        'gs1:example'
    """
    if uri.startswith("@"):
        return uri

    best = None
    for namespace in reverse:
        if namespace and uri.startswith(namespace) and len(uri) > len(namespace):
            if best is None or len(namespace) > len(best):
                best = namespace

    if best is None:
        return uri

    prefix = reverse[best]
    local = uri[len(best):]
    if prefix == VOCAB_KEYWORD:
        return local
    return f"{prefix}:{local}"


def expand_term(term: str, namespaces: Mapping[str, str]) -> str:
    """
    Expand a prefixed (or @vocab-relative) term into an absolute URI.

    Example:
        >>> expand_term("gs1:example", {"gs1": "http://gs1.org/voc/"})
        'http://gs1.org/voc/example'
    """
    if term.startswith("@"):
        return term

    prefix, sep, local = term.partition(":")
    if sep:
        if prefix in namespaces and not local.startswith("//"):
            return namespaces[prefix] + local
        return term

    if VOCAB_KEYWORD in namespaces:
        return namespaces[VOCAB_KEYWORD] + term
    return term

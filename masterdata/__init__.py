"""
Master Data Module

Maps GS1 Web Vocabulary master data to and from JSON-LD.
"""

from .context import DEFAULT_CONTEXT, reverse_namespaces, scrape_namespaces
from .errors import MappingError, MasterDataError, MissingContextError, UnknownVocabularyError
from .gs1_vocab_mapper import GS1VocabJsonMapper
from .mappers import GS1_WEB_VOCAB, get_mapper, map_vocab, parse_vocab
from .models import Location, PostalAddress, Tradeitem, TradingParty, VocabularyElement, jsonld_field

__all__ = [
    'DEFAULT_CONTEXT',
    'GS1_WEB_VOCAB',
    'GS1VocabJsonMapper',
    'Location',
    'MappingError',
    'MasterDataError',
    'MissingContextError',
    'PostalAddress',
    'Tradeitem',
    'TradingParty',
    'UnknownVocabularyError',
    'VocabularyElement',
    'get_mapper',
    'jsonld_field',
    'map_vocab',
    'parse_vocab',
    'reverse_namespaces',
    'scrape_namespaces',
]

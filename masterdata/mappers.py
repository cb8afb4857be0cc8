"""
Master Data Mappers

Registry of the vocabulary mappers available to callers, keyed by
vocabulary name. Today only the GS1 Web Vocabulary is supported.

Usage:
    python -m masterdata.mappers party.jsonld --type party
"""

import argparse
import logging
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Type

from masterdata.errors import MasterDataError, UnknownVocabularyError
from masterdata.gs1_vocab_mapper import GS1VocabJsonMapper
from masterdata.models import Location, Tradeitem, TradingParty, VocabularyElement

logger = logging.getLogger(__name__)

GS1_WEB_VOCAB = "GS1WebVocab"

MASTER_DATA_MAPPERS: Mapping[str, GS1VocabJsonMapper] = MappingProxyType({
    GS1_WEB_VOCAB: GS1VocabJsonMapper(),
})

VOCAB_TYPES: Mapping[str, Type[VocabularyElement]] = MappingProxyType({
    "party": TradingParty,
    "location": Location,
    "tradeitem": Tradeitem,
})


def get_mapper(name: str) -> GS1VocabJsonMapper:
    """
    Look up a registered mapper.

    Raises:
        UnknownVocabularyError: If no mapper is registered under name
    """
    mapper = MASTER_DATA_MAPPERS.get(name)
    if mapper is None:
        logger.error(f"No master data mapper registered for vocabulary {name!r}")
        raise UnknownVocabularyError(
            f"Unknown vocabulary: {name}. Available: {', '.join(MASTER_DATA_MAPPERS)}"
        )
    return mapper


def map_vocab(name: str, vocab: VocabularyElement) -> str:
    """Serialize a vocabulary object with the named mapper."""
    return get_mapper(name).map(vocab)


def parse_vocab(name: str, cls: Type[VocabularyElement], value: str) -> VocabularyElement:
    """Deserialize a JSON-LD document into cls with the named mapper."""
    return get_mapper(name).parse(cls, value)


def main() -> int:
    from utility.config import configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(description="Parse and re-emit GS1 Web Vocab master data")
    parser.add_argument("path", type=Path, help="JSON-LD master data document")
    parser.add_argument("--type", choices=sorted(VOCAB_TYPES), default="party")
    parser.add_argument("--vocab", default=GS1_WEB_VOCAB)
    args = parser.parse_args()

    try:
        vocab = parse_vocab(args.vocab, VOCAB_TYPES[args.type], args.path.read_text(encoding="utf-8"))
        print(map_vocab(args.vocab, vocab))
    except MasterDataError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Master Data Mapping Errors
"""


class MasterDataError(Exception):
    """Base class for master data mapping failures."""
    pass


class MissingContextError(MasterDataError):
    """Raised when a JSON-LD document has no @context to resolve terms against."""
    pass


class MappingError(MasterDataError):
    """Raised when a document or object cannot be mapped."""
    pass


class UnknownVocabularyError(MasterDataError):
    """Raised when no mapper is registered under the requested vocabulary name."""
    pass

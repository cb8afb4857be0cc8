"""
GS1 Web Vocabulary Master Data Models

Each model declares which JSON-LD predicate every attribute is bound to with
jsonld_field(). Predicates are absolute URIs (or the @id / @type keywords);
the mapper compacts them against the document's @context.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from gs1.pgln import PGLN

GS1_VOC = "http://gs1.org/voc/"

JSONLD_PREDICATE = "jsonld"


def jsonld_field(predicate: str, default: Any = None, **kwargs: Any) -> Any:
    """
    Declare a model attribute bound to a JSON-LD predicate.

    Args:
        predicate: Absolute predicate URI, or "@id" / "@type"
        default: Default attribute value

    Example:
        >>> class Example(VocabularyElement):
        ...     name: Optional[str] = jsonld_field("http://gs1.org/voc/name")
    """
    if "default_factory" not in kwargs:
        kwargs["default"] = default
    return Field(json_schema_extra={JSONLD_PREDICATE: predicate}, **kwargs)


class VocabularyElement(BaseModel):
    """
    Base class for every object mappable to and from JSON-LD.

    context holds the JSON-LD @context (a term-map dict or a list of them).
    It is never written as an ordinary attribute.
    """

    context: Optional[Any] = Field(default=None, exclude=True)


class PostalAddress(VocabularyElement):
    type: Optional[str] = jsonld_field("@type", GS1_VOC + "PostalAddress")
    street_address: Optional[str] = jsonld_field(GS1_VOC + "streetAddress")
    address_locality: Optional[str] = jsonld_field(GS1_VOC + "addressLocality")
    address_region: Optional[str] = jsonld_field(GS1_VOC + "addressRegion")
    postal_code: Optional[str] = jsonld_field(GS1_VOC + "postalCode")
    address_country: Optional[str] = jsonld_field(GS1_VOC + "addressCountry")


class TradingParty(VocabularyElement):
    """Business, department or private party identified by a PGLN."""

    id: Optional[PGLN] = jsonld_field("@id")
    type: Optional[str] = jsonld_field("@type", GS1_VOC + "Organization")
    pgln: Optional[PGLN] = jsonld_field(GS1_VOC + "partyGLN")
    organization_name: Optional[str] = jsonld_field(GS1_VOC + "organizationName")
    address: Optional[PostalAddress] = jsonld_field(GS1_VOC + "address")


class Location(VocabularyElement):
    """Physical place such as a farm, vessel, plant or warehouse."""

    id: Optional[str] = jsonld_field("@id")
    type: Optional[str] = jsonld_field("@type", GS1_VOC + "Place")
    gln: Optional[PGLN] = jsonld_field(GS1_VOC + "globalLocationNumber")
    physical_location_name: Optional[str] = jsonld_field(GS1_VOC + "physicalLocationName")
    address: Optional[PostalAddress] = jsonld_field(GS1_VOC + "address")


class Tradeitem(VocabularyElement):
    """Product master data keyed by GTIN."""

    id: Optional[str] = jsonld_field("@id")
    type: Optional[str] = jsonld_field("@type", GS1_VOC + "Product")
    gtin: Optional[str] = jsonld_field(GS1_VOC + "gtin")
    product_description: Optional[str] = jsonld_field(GS1_VOC + "productDescription")
    brand_name: Optional[str] = jsonld_field(GS1_VOC + "brandName")
    additional_trade_item_identification: List[str] = jsonld_field(
        GS1_VOC + "additionalTradeItemIdentification", default_factory=list
    )

"""Document model for the goods-registration API.

Field names follow Python conventions; aliases carry the key names the
remote endpoint expects.  Dump with ``by_alias=True`` to get wire format.
"""

import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentFormat(str, enum.Enum):
    MANUAL = "MANUAL"
    XML = "XML"
    CSV = "CSV"


class DocumentType(str, enum.Enum):
    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"
    LP_INTRODUCE_GOODS_CSV = "LP_INTRODUCE_GOODS_CSV"
    LP_INTRODUCE_GOODS_XML = "LP_INTRODUCE_GOODS_XML"


class ProductGroup(str, enum.Enum):
    CLOTHES = "CLOTHES"
    SHOES = "SHOES"
    TOBACCO = "TOBACCO"
    PERFUMERY = "PERFUMERY"
    TIRES = "TIRES"
    ELECTRONICS = "ELECTRONICS"
    PHARMA = "PHARMA"
    MILK = "MILK"
    BICYCLE = "BICYCLE"
    WHEELCHAIRS = "WHEELCHAIRS"


class CertificateDocument(str, enum.Enum):
    CONFORMITY_CERTIFICATE = "CONFORMITY_CERTIFICATE"
    CONFORMITY_DECLARATION = "CONFORMITY_DECLARATION"


class WireModel(BaseModel):
    """Base for payload models: accepts both field names and wire aliases."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        """JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)


class Description(WireModel):
    participant_inn: str = Field(..., alias="participantInn")


class Product(WireModel):
    """A single product line inside a registration document."""

    certificate_document: Optional[CertificateDocument] = None
    certificate_document_date: Optional[str] = None
    certificate_document_number: Optional[str] = None
    owner_inn: str
    producer_inn: str
    production_date: str
    tnved_code: str
    uit_code: Optional[str] = None
    uitu_code: Optional[str] = None


class Document(WireModel):
    """A goods-introduction document as accepted by ``/lk/documents/create``.

    Build one from a wire-format dict with ``Document.model_validate(data)``;
    missing required fields raise ``pydantic.ValidationError``.
    """

    description: Optional[Description] = None
    doc_id: str
    doc_status: str
    doc_type: str
    import_request: bool = Field(default=False, alias="importRequest")
    owner_inn: str
    participant_inn: str
    producer_inn: str
    production_date: str
    production_type: str
    products: List[Product] = Field(default_factory=list)
    reg_date: str
    reg_number: Optional[str] = None


class RequestBody(WireModel):
    """Envelope POSTed to the endpoint: encoded document plus signature."""

    document_format: DocumentFormat
    product_document: str
    product_group: Optional[ProductGroup] = None
    signature: str
    type: DocumentType

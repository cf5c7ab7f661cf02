"""docgate: rate-limited client for the goods-registration document API."""

from docgate.rate_limiter import RateLimiter, TimeUnit
from docgate.submitter import DocumentSubmitter, SubmissionResult
from docgate.serializer import JsonSerializer
from docgate.transport import HttpTransport
from docgate.models import (
    Description, Document, DocumentFormat, DocumentType, Product, ProductGroup,
)
from docgate.errors import AdmissionInterrupted, SubmissionError, TransportError

__all__ = [
    "RateLimiter", "TimeUnit",
    "DocumentSubmitter", "SubmissionResult",
    "JsonSerializer", "HttpTransport",
    "Description", "Document", "DocumentFormat", "DocumentType",
    "Product", "ProductGroup",
    "AdmissionInterrupted", "SubmissionError", "TransportError",
]
__version__ = "0.1.0"

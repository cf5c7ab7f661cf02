"""Rate-limited submission of documents to the registration API."""

import logging
from dataclasses import dataclass
from typing import Optional

from docgate.encoding import encode_base64
from docgate.errors import SerializationError, SubmissionError, TransportError
from docgate.models import Document, DocumentFormat, DocumentType, ProductGroup, RequestBody
from docgate.rate_limiter import RateLimiter
from docgate.serializer import JsonSerializer, Serializer
from docgate.transport import HttpTransport, Transport

logger = logging.getLogger(__name__)

BASE_URL = "https://ismp.crpt.ru/api/v3"
CREATE_DOCUMENT_PATH = "/lk/documents/create"


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of one submission.

    Attributes:
        body: Raw response text, empty on failure.
        error: The failure that emptied *body*, or ``None``.
    """

    body: str = ""
    error: Optional[SubmissionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DocumentSubmitter:
    """Registers documents through the rate limiter, one POST per call.

    The limiter gates only the *start* of each call; once admitted,
    concurrent submissions run their network calls independently.

    Usage::

        submitter = DocumentSubmitter(RateLimiter(5, TimeUnit.SECONDS), token=token)
        response = submitter.create_document_rf(document, signature)
    """

    def __init__(self, limiter: RateLimiter,
                 transport: Optional[Transport] = None,
                 serializer: Optional[Serializer] = None,
                 *, token: str = "", base_url: str = BASE_URL) -> None:
        self.limiter = limiter
        self.transport = transport if transport is not None else HttpTransport()
        self.serializer = serializer if serializer is not None else JsonSerializer()
        self.token = token
        self.base_url = base_url.rstrip("/")

    @property
    def create_url(self) -> str:
        return f"{self.base_url}{CREATE_DOCUMENT_PATH}"

    def set_token(self, token: str) -> None:
        """Replace the bearer token used for subsequent calls."""
        self.token = token

    def _serialize(self, obj) -> Optional[str]:
        """Run the injected serializer, treating any exception as no output."""
        try:
            return self.serializer.serialize(obj)
        except Exception as exc:
            logger.error("Serializer raised on %s: %s", type(obj).__name__, exc)
            return None

    def build_body(self, document: Document, signature: str,
                   document_format: DocumentFormat = DocumentFormat.MANUAL,
                   document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
                   product_group: Optional[ProductGroup] = None) -> RequestBody:
        """Encode *document* and *signature* into a request envelope.

        A document the serializer cannot handle is sent as an empty
        encoded string.
        """
        document_json = self._serialize(document)
        if document_json is None:
            logger.error("Document %s could not be serialized, sending it empty",
                         getattr(document, "doc_id", "?"))

        return RequestBody(
            document_format=document_format,
            product_document=encode_base64(document_json),
            signature=encode_base64(signature),
            type=document_type,
            product_group=product_group,
        )

    def submit_result(self, document: Document, signature: str, *,
                      document_format: DocumentFormat = DocumentFormat.MANUAL,
                      document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
                      product_group: Optional[ProductGroup] = None) -> SubmissionResult:
        """Wait for admission, then POST the document once.

        Returns:
            A ``SubmissionResult`` carrying the response text, or the
            serialization/transport error that prevented one.

        Raises:
            AdmissionInterrupted: If the limiter wait was cancelled.
        """
        self.limiter.acquire()

        body = self.build_body(document, signature, document_format,
                               document_type, product_group)
        payload = self._serialize(body)
        if payload is None:
            err = SerializationError("Request body could not be serialized")
            logger.error(err.message)
            return SubmissionResult(error=err)

        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            text = self.transport.post(self.create_url, payload, headers)
        except TransportError as exc:
            return SubmissionResult(error=exc)
        except Exception as exc:
            logger.error("Registration request failed: %s", exc)
            return SubmissionResult(error=TransportError(f"Registration request failed: {exc}"))

        return SubmissionResult(body=text or "")

    def submit(self, document: Document, signature: str, **kwargs) -> str:
        """Like :meth:`submit_result` but return only the body text.

        Failures yield an empty string.
        """
        return self.submit_result(document, signature, **kwargs).body

    def create_document_rf(self, document: Document, signature: str) -> str:
        """Introduce goods produced in the Russian Federation into circulation."""
        return self.submit(document, signature,
                           document_format=DocumentFormat.MANUAL,
                           document_type=DocumentType.LP_INTRODUCE_GOODS)

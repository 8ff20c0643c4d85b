"""
DocuExtract Gateway Python客户端SDK
"""

from .client import DocuExtractClient, extract_document, REQUEST_TIMEOUT
from .config import ClientConfig
from .models import DocumentType, ProviderName, get_mime_type
from .exceptions import (
    DocuExtractError,
    InvalidDocumentError,
    GatewayConnectionError,
    GatewayHTTPError,
    InvalidResponseError,
)

__version__ = "1.0.0"
__all__ = [
    "DocuExtractClient",
    "ClientConfig",
    "DocumentType",
    "ProviderName",
    "get_mime_type",
    "DocuExtractError",
    "InvalidDocumentError",
    "GatewayConnectionError",
    "GatewayHTTPError",
    "InvalidResponseError",
    "REQUEST_TIMEOUT",
    "extract_document",
]

"""
Services layer for the HR chat client

This module contains the backend gateway and the local document
helpers used to prepare uploads.
"""

from .hr_chat_service import HRChatService, HRChatAPIError
from .document_loader import (
    UnsupportedDocumentError,
    build_upload_request,
    document_type_for_tool,
    extract_text,
)

__all__ = [
    "HRChatService",
    "HRChatAPIError",
    "UnsupportedDocumentError",
    "build_upload_request",
    "document_type_for_tool",
    "extract_text"
]

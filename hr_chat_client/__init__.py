"""
HR Chat Client

Async client for the HR assistant chat backend: document upload,
chat messaging and session lifecycle.
"""

from .config import Settings, get_settings
from .models import (
    ChatRequest,
    ChatResponse,
    ChatResponseMetadata,
    ChatSession,
    DocumentReference,
    DocumentUploadRequest,
    DocumentUploadResponse,
)
from .services import HRChatAPIError, HRChatService, UnsupportedDocumentError

__all__ = [
    "Settings",
    "get_settings",
    "ChatRequest",
    "ChatResponse",
    "ChatResponseMetadata",
    "ChatSession",
    "DocumentReference",
    "DocumentUploadRequest",
    "DocumentUploadResponse",
    "HRChatAPIError",
    "HRChatService",
    "UnsupportedDocumentError"
]

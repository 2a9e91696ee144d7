"""
Data models for the HR chat client

This module contains the Pydantic models exchanged with the HR chat backend.
"""

from .chat import ChatRequest, ChatResponse, ChatResponseMetadata, ChatSession
from .documents import DocumentReference, DocumentUploadRequest, DocumentUploadResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ChatResponseMetadata",
    "ChatSession",
    "DocumentReference",
    "DocumentUploadRequest",
    "DocumentUploadResponse"
]

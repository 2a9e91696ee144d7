"""
Document-related data models
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, Dict, Any


class DocumentUploadRequest(BaseModel):
    """Request model for uploading extracted document text"""
    model_config = ConfigDict(extra="allow")

    session_id: str
    filename: str
    content: str
    document_type: str
    metadata: Optional[Dict[str, Any]] = None


class DocumentUploadResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    document_id: str
    filename: str
    chunks_created: int
    success: bool
    message: str


class DocumentReference(BaseModel):
    """Retrieval provenance for a chunk of an uploaded document"""
    model_config = ConfigDict(extra="allow")

    document_id: str
    chunk_id: str
    relevance_score: float
    text_snippet: str

"""
Chat-related data models

These models define the structure for chat messages and sessions
exchanged with the HR chat backend.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Dict, Any


class ChatRequest(BaseModel):
    """Request model for a chat message"""
    model_config = ConfigDict(extra="allow")

    session_id: str
    message: str
    tool_type: str
    role_level: str
    job_type: str
    language: str


class ChatResponseMetadata(BaseModel):
    """Classification tags echoed back by the backend"""
    model_config = ConfigDict(extra="allow")

    tool_type: str
    language: str
    role_level: str
    job_type: str


class ChatResponse(BaseModel):
    """Response model for a chat message"""
    model_config = ConfigDict(extra="allow")

    message_id: str
    content: str
    context_snippets: List[str]
    metadata: ChatResponseMetadata


class ChatSession(BaseModel):
    """A server-tracked conversation context"""
    model_config = ConfigDict(extra="allow")

    session_id: str
    user_id: Optional[str] = None
    tool_type: str
    # ISO-8601 text as sent by the backend
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    document_ids: List[str]
    message_count: int
    settings: Optional[Dict[str, Any]] = None

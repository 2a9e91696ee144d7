"""
Pytest configuration and shared fixtures for the HR chat client tests.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import patch

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from hr_chat_client.config import Settings
from hr_chat_client.services.hr_chat_service import HRChatService


@dataclass
class RecordedRequest:
    """A request as seen by the stub backend"""
    method: str
    path: str
    query_string: str
    query: Any
    headers: Any
    body: str


@dataclass
class StubBackend:
    """Minimal stand-in for the HR chat backend that records every call."""
    base_url: str = ""
    requests: List[RecordedRequest] = field(default_factory=list)
    responses: Dict[str, Tuple[int, Any]] = field(default_factory=dict)

    def respond(self, path: str, payload: Any, status: int = 200) -> None:
        """Register the answer for a path; str payloads are sent as plain text."""
        self.responses[path] = (status, payload)

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(RecordedRequest(
            method=request.method,
            path=request.path,
            query_string=request.query_string,
            query=request.query,
            headers=request.headers,
            body=await request.text(),
        ))
        status, payload = self.responses.get(request.path, (404, "not found"))
        if isinstance(payload, str):
            return web.Response(status=status, text=payload)
        return web.json_response(payload, status=status)


@pytest_asyncio.fixture
async def stub_backend():
    """Serve a StubBackend on a local port for the duration of a test."""
    backend = StubBackend()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", backend.handle)
    server = TestServer(app)
    await server.start_server()
    backend.base_url = f"http://{server.host}:{server.port}"
    try:
        yield backend
    finally:
        await server.close()


@pytest.fixture
def test_settings():
    """Create test settings with environment variables for testing."""
    test_env = {
        "HR_CHAT_API_URL": "http://hr-backend.test",
        "HR_CHAT_DEFAULT_TOOL_TYPE": "cv_analysis",
        "HR_CHAT_ENCODE_QUERY_PARAMS": "false",
        "DEBUG_LOGGING_DEV": "false",
        "DEBUG_LOGGING_PROD": "false"
    }

    with patch.dict(os.environ, test_env):
        yield Settings()


@pytest.fixture
def hr_chat_service(stub_backend, test_settings):
    """HRChatService pointed at the stub backend."""
    settings = test_settings.model_copy(update={"api_base_url": stub_backend.base_url})
    return HRChatService(settings)


@pytest.fixture
def sample_upload_request():
    return {
        "session_id": "s1",
        "filename": "jane_doe_cv.txt",
        "content": "Jane Doe\nSenior Python developer, 8 years of experience.",
        "document_type": "cv",
        "metadata": {"original_filename": "jane_doe_cv.txt", "file_size": 58}
    }


@pytest.fixture
def sample_upload_response():
    return {
        "document_id": "doc-1",
        "filename": "jane_doe_cv.txt",
        "chunks_created": 3,
        "success": True,
        "message": "Document uploaded successfully"
    }


@pytest.fixture
def sample_chat_request():
    return {
        "session_id": "s1",
        "message": "Summarize this candidate's strengths",
        "tool_type": "cv_analysis",
        "role_level": "senior",
        "job_type": "fulltime",
        "language": "en"
    }


@pytest.fixture
def sample_chat_response():
    return {
        "message_id": "m-42",
        "content": "The candidate has strong backend experience.",
        "context_snippets": ["Senior Python developer", "8 years of experience"],
        "metadata": {
            "tool_type": "cv_analysis",
            "language": "en",
            "role_level": "senior",
            "job_type": "fulltime"
        }
    }


@pytest.fixture
def sample_session():
    return {
        "session_id": "s1",
        "user_id": "u123",
        "tool_type": "cv_analysis",
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-01T10:00:00Z",
        "document_ids": [],
        "message_count": 0,
        "settings": {"language": "en"}
    }

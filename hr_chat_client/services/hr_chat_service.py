"""
HR Chat Service

Client for the HR assistant chat backend. Every operation is a single
request/response exchange issued through the request gateway; sessions,
chunking and answer generation all live server-side.
"""

import asyncio
import json
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

import aiohttp
from pydantic import BaseModel

from ..config import Settings, get_settings
from ..models import (
    ChatResponse,
    ChatResponseMetadata,
    ChatSession,
    DocumentUploadRequest,
    DocumentUploadResponse,
)
from ..utils.debug_logger import debug_logger
from .document_loader import build_upload_request

RequestBody = Union[BaseModel, Mapping[str, Any]]
ModelT = TypeVar("ModelT", bound=BaseModel)


class HRChatAPIError(Exception):
    """Raised when the backend answers with a non-2xx status"""

    def __init__(self, status: int, reason: Optional[str], body: str):
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"API Error: {status} {reason} - {body}")


def _merge_headers(defaults: Mapping[str, str], overrides: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Merge header mappings; override keys win regardless of case."""
    if not overrides:
        return dict(defaults)
    override_keys = {key.lower() for key in overrides}
    merged = {key: value for key, value in defaults.items() if key.lower() not in override_keys}
    merged.update(overrides)
    return merged


def _serialize(body: RequestBody) -> str:
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_unset=True)
    return json.dumps(dict(body))


def _construct(model: Type[ModelT], data: Any) -> Any:
    """Wrap a decoded body in a model without validating it."""
    if not isinstance(data, Mapping):
        return data
    return model.model_construct(**data)


class HRChatService:
    """Service for talking to the HR chat backend"""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the service

        Args:
            settings: Client configuration, defaults to get_settings()
            session: Optional shared aiohttp session; it is reused for every
                call and left open. Without one, each call opens its own.
        """
        self.settings = settings or get_settings()
        self._session = session

    @asynccontextmanager
    async def _client_session(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession() as session:
            yield session

    def _endpoint(self, path: str, **params: Optional[str]) -> str:
        """Append query parameters to a path, skipping those set to None."""
        pairs = []
        for key, value in params.items():
            if value is None:
                continue
            # Values are concatenated literally unless encoding is enabled
            if self.settings.encode_query_params:
                value = quote(str(value), safe="")
            pairs.append(f"{key}={value}")
        if not pairs:
            return path
        return f"{path}?{'&'.join(pairs)}"

    async def request(self,
                      endpoint: str,
                      method: str = "GET",
                      body: Optional[str] = None,
                      headers: Optional[Mapping[str, str]] = None,
                      request_id: Optional[str] = None) -> Any:
        """
        Issue a call against the backend and decode its JSON answer

        Args:
            endpoint: Path appended to the configured base URL
            method: HTTP method
            body: Already serialized JSON text
            headers: Extra headers; these override the defaults
            request_id: Id used in debug log lines, generated when omitted

        Returns:
            The decoded JSON body

        Raises:
            HRChatAPIError: If the response status is outside 200-299
        """
        url = f"{self.settings.api_base_url}{endpoint}"
        request_headers = _merge_headers(self.settings.default_headers, headers)
        kwargs: Dict[str, Any] = {"headers": request_headers}
        if body is not None:
            kwargs["data"] = body
        if self.settings.request_timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.settings.request_timeout)

        request_id = request_id or uuid.uuid4().hex[:8]
        started_at = time.perf_counter()
        debug_logger.log_http(request_id, f"{method} {url}")

        async with self._client_session() as session:
            async with session.request(method, url, **kwargs) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    debug_logger.log_http(
                        request_id, "Backend returned an error", started_at, status=response.status
                    )
                    raise HRChatAPIError(response.status, response.reason, error_text)
                data = await response.json(content_type=None)

        debug_logger.log_timing(
            request_id, f"{method} {endpoint}", (time.perf_counter() - started_at) * 1000
        )
        return data

    async def upload_document_text(self,
                                   request: RequestBody,
                                   headers: Optional[Mapping[str, str]] = None) -> DocumentUploadResponse:
        """Upload extracted document text to a session."""
        return await self._upload(request, headers)

    async def _upload(self,
                      request: RequestBody,
                      headers: Optional[Mapping[str, str]],
                      request_id: Optional[str] = None) -> DocumentUploadResponse:
        data = await self.request(
            "/hr/chat/upload-document-text",
            method="POST",
            body=_serialize(request),
            headers=headers,
            request_id=request_id,
        )
        return _construct(DocumentUploadResponse, data)

    async def upload_document_file(self,
                                   session_id: str,
                                   path: Union[str, Path],
                                   tool_type: Optional[str] = None,
                                   headers: Optional[Mapping[str, str]] = None) -> DocumentUploadResponse:
        """
        Extract text from a local file and upload it to a session

        Args:
            session_id: Session the document belongs to
            path: PDF or text file
            tool_type: Tool the document is for, defaults to the configured tool type
            headers: Extra headers for the upload call

        Returns:
            DocumentUploadResponse from the backend
        """
        if tool_type is None:
            tool_type = self.settings.default_tool_type
        request_id = uuid.uuid4().hex[:8]
        started_at = time.perf_counter()
        upload_request: DocumentUploadRequest = await asyncio.to_thread(
            build_upload_request, session_id, path, tool_type
        )
        debug_logger.log_documents(
            request_id,
            f"Extracted {len(upload_request.content)} characters from {upload_request.filename}",
            started_at,
            document_type=upload_request.document_type,
        )
        return await self._upload(upload_request, headers, request_id)

    async def send_message(self,
                           request: RequestBody,
                           headers: Optional[Mapping[str, str]] = None) -> ChatResponse:
        """Send a user message and return the generated answer."""
        data = await self.request(
            "/hr/chat/message", method="POST", body=_serialize(request), headers=headers
        )
        if isinstance(data, Mapping) and isinstance(data.get("metadata"), Mapping):
            data = {**data, "metadata": ChatResponseMetadata.model_construct(**data["metadata"])}
        return _construct(ChatResponse, data)

    async def create_session(self,
                             tool_type: Optional[str] = None,
                             user_id: Optional[str] = None,
                             headers: Optional[Mapping[str, str]] = None) -> ChatSession:
        endpoint = self._endpoint(
            "/hr/chat/create-session",
            tool_type=tool_type if tool_type is not None else self.settings.default_tool_type,
            user_id=user_id or None,
        )
        data = await self.request(endpoint, method="POST", headers=headers)
        return _construct(ChatSession, data)

    async def get_session_documents(self,
                                    session_id: str,
                                    headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        endpoint = self._endpoint("/hr/chat/session-documents", session_id=session_id)
        return await self.request(endpoint, method="GET", headers=headers)

    async def delete_document(self,
                              session_id: str,
                              document_id: str,
                              headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        endpoint = self._endpoint(
            "/hr/chat/delete-document", session_id=session_id, document_id=document_id
        )
        return await self.request(endpoint, method="DELETE", headers=headers)

    async def cleanup_session(self,
                              session_id: str,
                              user_id: Optional[str] = None,
                              headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        endpoint = self._endpoint(
            "/hr/chat/cleanup-session", session_id=session_id, user_id=user_id or None
        )
        return await self.request(endpoint, method="DELETE", headers=headers)

"""
Document Loader

Turns local CV, job description and policy files into upload requests
for the HR chat backend. Only text extraction happens here; chunking
and indexing are done server-side.
"""

import logging
import mimetypes
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from ..models import DocumentUploadRequest

logger = logging.getLogger(__name__)

CV_ANALYSIS = "cv_analysis"
JD_CREATION = "jd_creation"
INTERVIEW_PREP = "interview_prep"
POLICY_REVIEW = "policy_review"

TOOL_TYPES = (CV_ANALYSIS, JD_CREATION, INTERVIEW_PREP, POLICY_REVIEW)

DOCUMENT_TYPES = {
    CV_ANALYSIS: "cv",
    JD_CREATION: "job_description",
    INTERVIEW_PREP: "cv",
    POLICY_REVIEW: "policy",
}

TEXT_SUFFIXES = (".txt", ".md")


class UnsupportedDocumentError(ValueError):
    """Raised for files that cannot be turned into text locally"""


def document_type_for_tool(tool_type: str) -> str:
    """Map a tool type to the document type tag the backend expects."""
    return DOCUMENT_TYPES.get(tool_type, "other")


def extract_text(path: Union[str, Path]) -> str:
    """
    Extract plain text from a PDF or any text file

    Args:
        path: Location of the file on disk

    Returns:
        The extracted text; every PDF page, empty ones included, ends with a newline

    Raises:
        UnsupportedDocumentError: If the file is neither a PDF nor a text/* type
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".pdf":
        text = ""
        with pdfplumber.open(path) as pdf:
            for page in pdf.pages:
                text += (page.extract_text() or "") + "\n"
        if not text.strip():
            logger.warning(f"No extractable text found in {path.name}")
        return text

    mime_type, _ = mimetypes.guess_type(path.name)
    if suffix in TEXT_SUFFIXES or (mime_type or "").startswith("text/"):
        return path.read_text(encoding="utf-8")

    raise UnsupportedDocumentError(
        f"Unsupported file type '{path.suffix}'. Please upload PDF or text files."
    )


def build_upload_request(session_id: str, path: Union[str, Path], tool_type: str,
                         content: Optional[str] = None) -> DocumentUploadRequest:
    """
    Build the upload request for a local file

    Args:
        session_id: Session the document belongs to
        path: Location of the file on disk
        tool_type: Tool the document is uploaded for; selects the document type
        content: Already extracted text, read from path when omitted

    Returns:
        DocumentUploadRequest carrying the file name, text and upload metadata
    """
    path = Path(path)
    if content is None:
        content = extract_text(path)

    return DocumentUploadRequest(
        session_id=session_id,
        filename=path.name,
        content=content,
        document_type=document_type_for_tool(tool_type),
        metadata={
            "original_filename": path.name,
            "file_size": path.stat().st_size,
            "upload_timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )

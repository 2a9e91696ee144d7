"""
Debug logging utility with timing support

Provides centralized debug logging for outgoing backend calls with
request ids, elapsed time and consistent formatting.
"""

import time
import os
from typing import Optional


class DebugLogger:
    """Centralized debug logging with timing support"""

    def __init__(self):
        # Check if we're running in Lambda (production) or locally (development)
        is_lambda = os.getenv("AWS_LAMBDA_FUNCTION_NAME") is not None

        if is_lambda:
            self.debug_enabled = os.getenv("DEBUG_LOGGING_PROD", "false").lower() == "true"
        else:
            self.debug_enabled = os.getenv("DEBUG_LOGGING_DEV", "false").lower() == "true"

    def log(self,
            request_id: str,
            service: str,
            message: str,
            started_at: Optional[float] = None,
            **kwargs) -> None:
        """
        Log a debug message with optional timing information

        Args:
            request_id: Identifier of the outgoing call
            service: Component name (e.g., 'HTTP', 'DOCS', 'TIMING')
            message: Debug message
            started_at: time.perf_counter() value taken when the call began
            **kwargs: Additional context to include in log
        """
        if not self.debug_enabled:
            return

        elapsed_seconds = None
        if started_at is not None:
            elapsed_seconds = f"{time.perf_counter() - started_at:.3f}s"

        timing_part = f" [{elapsed_seconds}]" if elapsed_seconds else ""
        context_part = f" [{request_id}]" if request_id else ""

        context_str = ""
        if kwargs:
            context_items = [f"{k}={v}" for k, v in kwargs.items()]
            context_str = f" {' '.join(context_items)}"

        # Format: [DEBUG] [service] [timing] [request_id] message [context]
        log_message = f"[DEBUG] [{service}]{timing_part}{context_part} {message}{context_str}"

        print(log_message)

    def log_http(self, request_id: str, message: str, started_at: Optional[float] = None, **kwargs):
        """Log a gateway call debug message"""
        self.log(request_id, "HTTP", message, started_at, **kwargs)

    def log_documents(self, request_id: str, message: str, started_at: Optional[float] = None, **kwargs):
        """Log a document loading debug message"""
        self.log(request_id, "DOCS", message, started_at, **kwargs)

    def log_timing(self, request_id: str, operation: str, duration_ms: float, **kwargs):
        """Log a specific timing measurement"""
        self.log(request_id, "TIMING", f"{operation} completed in {duration_ms:.3f}ms", **kwargs)


# Global debug logger instance
debug_logger = DebugLogger()

# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Delivery collaborators for rendered lessons.

The renderer returns a Markdown string and never touches disk or network;
these helpers take it from there:
    - file_manager: write Markdown, fragment diagnostics and source JSON
    - webhook: post the Markdown (or a failure report) to an automation endpoint
"""

from .file_manager import LessonFileManager, lesson_identifier
from .webhook import (
    REASON_INVALID_JSON,
    REASON_LESSON_PARSE_FAILED,
    DeliveryError,
    WebhookDelivery,
)

__all__ = [
    "LessonFileManager",
    "lesson_identifier",
    "WebhookDelivery",
    "DeliveryError",
    "REASON_INVALID_JSON",
    "REASON_LESSON_PARSE_FAILED",
]

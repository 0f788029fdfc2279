"""Rewrite engine: reverse index, span resolution and batch coordination."""

from .apply_spans import apply_spans
from .BatchOutcome import BatchOutcome
from .BatchRewriter import BatchRewriter
from .BatchStage import BatchStage
from .build_reverse_index import build_reverse_index
from .build_url_map import build_url_map
from .format_display_name import DEFAULT_CAPTURE_NAME, format_display_name
from .LinkSpan import LinkSpan
from .ProgressLog import ProgressEvent, ProgressLog
from .resolve_spans import resolve_spans
from .RewriteConfig import RewriteConfig
from .SpanBuilder import SpanBuilder
from .SpanOverlapConflict import SpanOverlapConflict
from .UploadMismatchError import UploadMismatchError
from .UploadTransportError import UploadTransportError

__all__ = [
    "DEFAULT_CAPTURE_NAME",
    "BatchOutcome",
    "BatchRewriter",
    "BatchStage",
    "LinkSpan",
    "ProgressEvent",
    "ProgressLog",
    "RewriteConfig",
    "SpanBuilder",
    "SpanOverlapConflict",
    "UploadMismatchError",
    "UploadTransportError",
    "apply_spans",
    "build_reverse_index",
    "build_url_map",
    "format_display_name",
    "resolve_spans",
]

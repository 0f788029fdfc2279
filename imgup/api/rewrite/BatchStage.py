"""Batch rewrite stages."""

from enum import Enum


class BatchStage(str, Enum):
    IDLE = "idle"
    RESOLVING_LINKS = "resolving_links"
    FINDING_SPANS = "finding_spans"
    UPLOADING = "uploading"
    BUILDING_URL_MAP = "building_url_map"
    REWRITING = "rewriting"
    DELETING = "deleting"
    DONE = "done"
    ABORTED = "aborted"

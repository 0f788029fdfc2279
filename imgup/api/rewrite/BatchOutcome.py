"""BatchOutcome model (UNO: single model)."""

from dataclasses import dataclass, field

from .BatchStage import BatchStage


@dataclass
class BatchOutcome:
    """Result of one batch rewrite.

    ``aborted_reason`` is None unless the batch stopped before completing.
    """

    success: bool = False
    affected_document_count: int = 0
    aborted_reason: str | None = None
    stage: BatchStage = BatchStage.IDLE
    targets: list[str] = field(default_factory=list)
    url_map: dict[str, str] = field(default_factory=dict)
    conflicts: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

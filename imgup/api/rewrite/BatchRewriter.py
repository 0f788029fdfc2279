"""Batch rewrite coordinator.

Drives one batch through its stages:

    IDLE -> RESOLVING_LINKS -> FINDING_SPANS -> UPLOADING -> BUILDING_URL_MAP
         -> REWRITING -> (DELETING) -> DONE

Any stage before REWRITING may end the batch in ABORTED without touching a
note. Once REWRITING starts, notes already written stay written.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Generator, Iterator
from typing import TYPE_CHECKING

from ..link.ImageRef import ImageRef
from ..vault.is_image_type import is_image_type
from .apply_spans import apply_spans
from .BatchOutcome import BatchOutcome
from .BatchStage import BatchStage
from .build_reverse_index import build_reverse_index
from .build_url_map import build_url_map
from .format_display_name import format_display_name
from .LinkSpan import LinkSpan
from .ProgressLog import ProgressLog
from .resolve_spans import resolve_spans
from .RewriteConfig import RewriteConfig
from .SpanBuilder import SpanBuilder
from .SpanOverlapConflict import SpanOverlapConflict
from .UploadMismatchError import UploadMismatchError
from .UploadTransportError import UploadTransportError

if TYPE_CHECKING:
    from ..ledger.UploadLedger import UploadLedger
    from ..upload.Uploader import Uploader
    from ..vault.Section import Section
    from ..vault.Vault import Vault

logger = logging.getLogger(__name__)

# Cap on live progress messages emitted while inverting the link graph.
_INDEX_PROGRESS_STEPS = 20


class BatchRewriter:
    """Upload a set of vault images and point every note at the uploaded URLs.

    ``run`` is a generator of ``(fraction, message)`` tuples; the outcome and
    the stage history are available on ``outcome`` and ``log`` afterwards.
    """

    def __init__(
        self,
        vault: Vault,
        uploader: Uploader,
        config: RewriteConfig,
        ledger: UploadLedger | None = None,
    ):
        self.vault = vault
        self.uploader = uploader
        self.config = config
        self.ledger = ledger
        self.log = ProgressLog()
        self.outcome = BatchOutcome()
        self._contents: dict[str, str] = {}
        self._unmatched: dict[str, set[str]] = {}

    @property
    def stage(self) -> BatchStage:
        return self.outcome.stage

    def _enter(self, stage: BatchStage) -> None:
        logger.debug("Batch stage %s -> %s", self.outcome.stage.value, stage.value)
        self.outcome.stage = stage

    def _record(self, message: str) -> None:
        self.log.append(self.outcome.stage, message)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.outcome.warnings.append(message)
        self.log.append(self.outcome.stage, f"Warning: {message}")

    def _abort(self, reason: str) -> None:
        logger.error("Batch aborted: %s", reason)
        self.outcome.aborted_reason = reason
        self.outcome.success = False
        self.log.append(BatchStage.ABORTED, f"Aborted: {reason}")
        self._enter(BatchStage.ABORTED)

    def _save_ledger(self) -> None:
        if self.ledger is None:
            return
        try:
            self.ledger.save()
        except RuntimeError as exc:
            self._warn(str(exc))

    def _format_name(self, name: str) -> str:
        return format_display_name(name, self.config.image_size_suffix, self.config.image_desc)

    def _select_targets(self, targets: list[str]) -> list[str]:
        selected: list[str] = []
        for target in dict.fromkeys(targets):
            if is_image_type(target):
                selected.append(target)
            else:
                self._warn(f"{target} is not an image file, skipped")
        return selected

    def run(self, targets: list[str]) -> Iterator[tuple[float, str]]:
        """Execute the batch for ``targets`` (vault paths of image files)."""
        self.outcome = BatchOutcome()
        self._contents = {}
        self._unmatched = {}
        self._enter(BatchStage.IDLE)
        try:
            yield from self._run(targets)
        except (UploadTransportError, UploadMismatchError, SpanOverlapConflict) as exc:
            self._abort(str(exc))
            yield (1.0, f"Aborted: {exc}")

    def _run(self, targets: list[str]) -> Iterator[tuple[float, str]]:
        selected = self._select_targets(targets)
        self.outcome.targets = selected
        if not selected:
            self._enter(BatchStage.DONE)
            self.outcome.success = True
            self._record("No image files to upload")
            yield (1.0, "No image files to upload")
            return

        reverse_index = yield from self._resolve_links(selected)
        span_set = yield from self._find_spans(selected, reverse_index)
        images, urls = yield from self._upload(selected)
        url_map = self._build_url_map(images, urls)
        yield (0.6, f"Mapped {len(url_map)} uploaded URL(s)")

        written = yield from self._rewrite(span_set, url_map)
        if not written:
            return

        if self.config.delete_source:
            yield from self._delete(selected, reverse_index)

        self._enter(BatchStage.DONE)
        self.outcome.success = True
        summary = f"Rewrote {self.outcome.affected_document_count} note(s)"
        self._record(summary)
        yield (1.0, summary)

    def _resolve_links(self, targets: list[str]) -> Generator[tuple[float, str], None, dict[str, dict[str, int]]]:
        """Invert the link graph for ``targets``.

        Inversion is a single in-memory pass, so its count/total marks are
        collected through the callback and replayed once the index is built.
        """
        self._enter(BatchStage.RESOLVING_LINKS)
        yield (0.05, "Resolving links in vault...")
        graph = self.vault.get_forward_link_graph()

        marks: list[tuple[int, int]] = []
        step = max(1, len(graph) // _INDEX_PROGRESS_STEPS)

        def on_progress(count: int, total: int) -> None:
            if count % step == 0 or count == total:
                marks.append((count, total))

        reverse_index = build_reverse_index(graph, targets, on_progress=on_progress)
        for count, total in marks:
            yield (0.05 + 0.15 * count / total, f"Resolving links in vault ({count}/{total})...")
        self._record(f"Resolving links in vault ({len(graph)}/{len(graph)})... Done")
        return reverse_index

    def _read_scanned(self, doc_id: str) -> str:
        if doc_id not in self._contents:
            self._contents[doc_id] = self.vault.read_document(doc_id)
        return self._contents[doc_id]

    def _find_spans(
        self,
        targets: list[str],
        reverse_index: dict[str, dict[str, int]],
    ) -> Generator[tuple[float, str], None, dict[str, list[LinkSpan]]]:
        self._enter(BatchStage.FINDING_SPANS)
        builder = SpanBuilder()
        sections_by_doc: dict[str, list[Section]] = {}
        unreadable: set[str] = set()
        total = len(targets)
        for count, target_id in enumerate(targets, start=1):
            name = posixpath.basename(target_id)
            yield (0.2 + 0.3 * count / total, f"Finding relevant notes for {name} ({count}/{total})...")
            for doc_id in reverse_index[target_id]:
                if doc_id in unreadable:
                    continue
                try:
                    content = self._read_scanned(doc_id)
                    if doc_id not in sections_by_doc:
                        sections_by_doc[doc_id] = self.vault.get_sections(doc_id)
                except (OSError, UnicodeDecodeError) as exc:
                    unreadable.add(doc_id)
                    self.outcome.skipped.append(doc_id)
                    self._warn(f"Cannot read {doc_id}: {exc}")
                    continue
                spans = resolve_spans(
                    self.vault,
                    target_id,
                    doc_id,
                    content,
                    sections_by_doc[doc_id],
                    self.config.allowed_code_types,
                )
                # Linked in the graph but nothing to rewrite: the source must survive.
                if not spans:
                    self._unmatched.setdefault(target_id, set()).add(doc_id)
                builder.add(doc_id, spans)

        span_set, conflicts = builder.build()
        if conflicts and self.config.overlap_policy == "batch":
            raise conflicts[0]
        for conflict in conflicts:
            self.outcome.conflicts.append(conflict.doc_id)
            self._warn(f"{conflict}; {conflict.doc_id} is left unchanged")
        self._record(f"Finding relevant notes for {total} image file(s)... Done")
        return span_set

    def _upload(self, targets: list[str]) -> Generator[tuple[float, str], None, tuple[list[ImageRef], list[str]]]:
        self._enter(BatchStage.UPLOADING)
        images = []
        for target_id in targets:
            name = posixpath.basename(target_id)
            images.append(
                ImageRef(
                    path=target_id,
                    name=name,
                    source=f"![{name}]({target_id})",
                    file=self.vault.vault_path / target_id,
                )
            )
        message = f"Uploading {len(images)} image file(s), it may take a while..."
        yield (0.55, message)
        result = self.uploader.upload(images)
        if not result.success:
            raise UploadTransportError(f"Upload error: {result.msg}" if result.msg else "Upload error")
        self._record(f"{message} Done")
        return images, result.result

    def _build_url_map(self, images: list[ImageRef], urls: list[str]) -> dict[str, str]:
        self._enter(BatchStage.BUILDING_URL_MAP)
        url_map = build_url_map([image.path for image in images], urls)
        self.outcome.url_map = url_map
        if self.ledger is not None:
            self.ledger.record(images, [url_map[image.path] for image in images])
            self._save_ledger()
        return url_map

    def _rewrite(
        self,
        span_set: dict[str, list[LinkSpan]],
        url_map: dict[str, str],
    ) -> Generator[tuple[float, str], None, bool]:
        self._enter(BatchStage.REWRITING)
        total = len(span_set)
        for count, (doc_id, spans) in enumerate(span_set.items(), start=1):
            yield (0.6 + 0.35 * count / total, f"Replacing links in {doc_id} ({count}/{total})...")
            scanned = self._contents[doc_id]
            try:
                current = self.vault.read_document(doc_id)
            except (OSError, UnicodeDecodeError) as exc:
                self.outcome.skipped.append(doc_id)
                self._warn(f"Cannot read {doc_id}: {exc}")
                continue
            if self.config.check_freshness and current != scanned:
                self.outcome.skipped.append(doc_id)
                self._warn(f"{doc_id} changed since it was scanned, skipped")
                continue

            new_content = apply_spans(current, spans, url_map, self._format_name)
            if new_content == current:
                continue
            try:
                self.vault.write_document(doc_id, new_content)
            except OSError as exc:
                self._abort(
                    f"Failed to write {doc_id}: {exc} "
                    f"({self.outcome.affected_document_count} note(s) already rewritten)"
                )
                yield (1.0, f"Aborted: failed to write {doc_id}")
                return False
            self.outcome.affected_document_count += 1
            logger.info("Rewrote %d image link(s) in %s", len(spans), doc_id)
        self._record(f"Replacing links in {total} file(s)... Done")
        return True

    def _delete(
        self,
        targets: list[str],
        reverse_index: dict[str, dict[str, int]],
    ) -> Iterator[tuple[float, str]]:
        self._enter(BatchStage.DELETING)
        left_behind = set(self.outcome.conflicts) | set(self.outcome.skipped)
        message = f"Deleting {len(targets)} local image file(s), this may take a while..."
        yield (0.97, message)
        for target_id in targets:
            unmatched = self._unmatched.get(target_id, set())
            still_linked = sorted(
                doc for doc in reverse_index[target_id] if doc in left_behind or doc in unmatched
            )
            if still_linked:
                self._warn(f"Kept {target_id}: still linked from {', '.join(still_linked)}")
                continue
            try:
                self.vault.trash(target_id)
            except OSError as exc:
                self._warn(f"Failed to trash {target_id}: {exc}")
                continue
            self.outcome.deleted.append(target_id)
            if self.ledger is not None:
                self.ledger.forget_path(target_id)
        if self.outcome.deleted:
            self._save_ledger()
        self._record(f"{message} Done")

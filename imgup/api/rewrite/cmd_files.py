"""Rewrite files API command.

CLI: imgup rewrite files <path>...
"""

import logging
from collections.abc import Iterator

from .._output_schemas.rewrite import RewriteFilesOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_files(paths: list[str]) -> StageResult:
    """Upload vault image files and rewrite every note that embeds them.

    Args:
        paths: Image files, absolute or relative to the vault (or CWD inside the vault)
    """

    def _fail(result_obj: StageResult, errors: list[str], targets: list[str] | None = None) -> None:
        result_obj.output = RewriteFilesOutput(
            errors=errors,
            warnings=[],
            success=False,
            targets=targets or [],
            url_map={},
            affected_document_count=0,
            conflicts=[],
            deleted=[],
            aborted_reason="",
            log=[],
        ).model_dump(mode="python")
        result_obj.result = errors[0]
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.ImgupConfig import ImgupConfig
        from ..ledger.UploadLedger import UploadLedger
        from ..upload.Uploader import Uploader
        from ..vault.resolve_vault_path import resolve_vault_path
        from ..vault.Vault import Vault
        from ..vault.VaultPathError import VaultPathError
        from .BatchRewriter import BatchRewriter

        yield (0.01, "Loading configuration...")
        try:
            config = ImgupConfig.load()
        except ValueError as e:
            _fail(result_obj, [str(e)])
            return

        warnings: list[str] = []
        try:
            ledger: UploadLedger | None = UploadLedger.default()
        except ValueError as e:
            logger.warning("Upload ledger unavailable: %s", e)
            warnings.append(f"Upload ledger unavailable: {e}")
            ledger = None

        try:
            with Vault(config.vault) as vault:
                targets: list[str] = []
                errors: list[str] = []
                for path in paths:
                    try:
                        targets.append(resolve_vault_path(path, vault.vault_path))
                    except VaultPathError as e:
                        errors.append(str(e))
                if errors:
                    _fail(result_obj, errors, targets)
                    return

                rewriter = BatchRewriter(vault, Uploader(config.uploader), config.rewrite, ledger=ledger)
                yield from rewriter.run(targets)
        except (ValueError, RuntimeError) as e:
            _fail(result_obj, [str(e)])
            return

        outcome = rewriter.outcome
        warnings.extend(outcome.warnings)
        errors = [outcome.aborted_reason] if outcome.aborted_reason else []
        result_obj.output = RewriteFilesOutput(
            errors=errors,
            warnings=warnings,
            success=outcome.success,
            targets=outcome.targets,
            url_map=outcome.url_map,
            affected_document_count=outcome.affected_document_count,
            conflicts=outcome.conflicts,
            deleted=outcome.deleted,
            aborted_reason=outcome.aborted_reason or "",
            log=rewriter.log.messages(),
        ).model_dump(mode="python")
        if outcome.success:
            result_obj.result = (
                f"Uploaded {len(outcome.url_map)} image(s), rewrote {outcome.affected_document_count} note(s)"
            )
        else:
            result_obj.result = f"Batch aborted: {outcome.aborted_reason}"
        result_obj.success = outcome.success

    return StageResult(
        announce=f"Uploading {len(paths)} image file(s) and rewriting links...",
        progress_callback=do_work,
    )

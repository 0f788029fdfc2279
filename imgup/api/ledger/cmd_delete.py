"""Ledger delete API command.

CLI: imgup ledger delete <img_url>
"""

import logging
from collections.abc import Iterator

from .._output_schemas.ledger import LedgerDeleteOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_delete(img_url: str) -> StageResult:
    """Delete an uploaded image from the image host and drop it from the ledger.

    Args:
        img_url: URL recorded in the ledger
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = LedgerDeleteOutput(
            errors=[message],
            warnings=[],
            success=False,
            img_url=img_url,
            removed=False,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.ImgupConfig import ImgupConfig
        from ..upload.Uploader import Uploader
        from .UploadLedger import UploadLedger

        yield (0.1, "Loading configuration...")
        try:
            config = ImgupConfig.load()
            ledger = UploadLedger.default()
        except ValueError as e:
            _fail(result_obj, str(e))
            return

        entry = ledger.find(img_url)
        if entry is None:
            _fail(result_obj, f"No uploaded image recorded for {img_url}")
            return

        yield (0.4, "Deleting remote image...")
        try:
            deleted = Uploader(config.uploader).delete([entry.model_dump(mode="json")])
        except Exception as e:
            logger.error("Remote delete of %s failed: %s", img_url, e)
            _fail(result_obj, f"Delete failed: {e}")
            return
        if not deleted:
            _fail(result_obj, "Delete failed")
            return

        yield (0.8, "Updating ledger...")
        ledger.remove(img_url)
        try:
            ledger.save()
        except RuntimeError as e:
            result_obj.output = LedgerDeleteOutput(
                errors=[],
                warnings=[str(e)],
                success=True,
                img_url=img_url,
                removed=False,
            ).model_dump(mode="python")
            result_obj.result = "Deleted successfully, ledger not updated"
            result_obj.success = True
            return

        yield (1.0, "Complete")
        result_obj.output = LedgerDeleteOutput(
            errors=[],
            warnings=[],
            success=True,
            img_url=img_url,
            removed=True,
        ).model_dump(mode="python")
        result_obj.result = "Deleted successfully"
        result_obj.success = True

    return StageResult(
        announce=f"Deleting {img_url}...",
        progress_callback=do_work,
    )

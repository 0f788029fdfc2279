"""Rewrite paste API command.

CLI: imgup rewrite paste [text]
"""

import logging
from collections.abc import Iterator

from .._output_schemas.rewrite import RewritePasteOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_paste(text: str) -> StageResult:
    """Re-upload network images referenced in a piece of text.

    Args:
        text: Markdown about to be pasted into a note
    """

    def _finish(result_obj: StageResult, success: bool, message: str, **fields) -> None:
        result_obj.output = RewritePasteOutput(
            errors=fields.get("errors", []),
            warnings=fields.get("warnings", []),
            success=success,
            text=fields.get("text", text),
            images=fields.get("images", []),
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.ImgupConfig import ImgupConfig
        from ..ledger.UploadLedger import UploadLedger
        from ..link.extract_image_refs import extract_image_refs
        from ..upload.Uploader import Uploader
        from ._filter_network_refs import _filter_network_refs
        from ._rewrite_sources import _rewrite_sources
        from .format_display_name import format_display_name

        yield (0.1, "Loading configuration...")
        try:
            config = ImgupConfig.load()
        except ValueError as e:
            _finish(result_obj, False, str(e), errors=[str(e)])
            return
        rewrite_cfg = config.rewrite

        if not rewrite_cfg.work_on_network:
            message = "rewrite.work_on_network is disabled, text left unchanged"
            _finish(result_obj, True, message, warnings=[message])
            return

        images = [ref for ref in _filter_network_refs(extract_image_refs(text), rewrite_cfg) if ref.is_network]
        if not images:
            _finish(result_obj, True, "No network images to upload")
            return

        yield (0.3, f"Uploading {len(images)} network image(s)...")
        upload_result = Uploader(config.uploader).upload(images)
        if not upload_result.success:
            message = f"Upload error: {upload_result.msg}" if upload_result.msg else "Upload error"
            _finish(result_obj, False, message, errors=[message])
            return
        urls = upload_result.result
        if len(urls) != len(images):
            message = f"Upload returned {len(urls)} URL(s) for {len(images)} file(s), text left unchanged"
            _finish(result_obj, False, message, errors=[message])
            return

        warnings: list[str] = []
        try:
            ledger = UploadLedger.default()
            ledger.record(images, urls)
            ledger.save()
        except (ValueError, RuntimeError) as e:
            logger.warning("Upload ledger not updated: %s", e)
            warnings.append(f"Upload ledger not updated: {e}")

        yield (0.9, "Replacing links...")

        def format_name(name: str) -> str:
            return format_display_name(name, rewrite_cfg.image_size_suffix, rewrite_cfg.image_desc)

        yield (1.0, "Complete")
        _finish(
            result_obj,
            True,
            f"Uploaded {len(images)} network image(s)",
            warnings=warnings,
            text=_rewrite_sources(text, images, urls, format_name),
            images=[{"path": image.path, "name": image.name, "url": url} for image, url in zip(images, urls)],
        )

    return StageResult(
        announce="Uploading network images in text...",
        progress_callback=do_work,
    )

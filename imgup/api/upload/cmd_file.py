"""Upload file API command.

CLI: imgup upload file <path>...
"""

import logging
from collections.abc import Iterator

from .._output_schemas.upload import UploadFileOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_file(paths: list[str]) -> StageResult:
    """Upload local image files and return one markdown embed per file.

    Args:
        paths: Image files anywhere on disk
    """

    def _fail(result_obj: StageResult, errors: list[str]) -> None:
        result_obj.output = UploadFileOutput(
            errors=errors,
            warnings=[],
            success=False,
            urls=[],
            embeds=[],
        ).model_dump(mode="python")
        result_obj.result = errors[0]
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ...utils.normalize_path import normalize_path
        from ..config.ImgupConfig import ImgupConfig
        from ..ledger.UploadLedger import UploadLedger
        from ..link.ImageRef import ImageRef
        from ..rewrite.format_display_name import format_display_name
        from ..vault.is_image_type import is_image_type
        from .Uploader import Uploader

        yield (0.1, "Loading configuration...")
        try:
            config = ImgupConfig.load()
        except ValueError as e:
            _fail(result_obj, [str(e)])
            return

        yield (0.2, "Checking files...")
        images: list[ImageRef] = []
        errors: list[str] = []
        for path in paths:
            file = normalize_path(path)
            if not file.is_file():
                errors.append(f"File not found: {file}")
            elif not is_image_type(file.name):
                errors.append(f"Not an image file: {file}")
            else:
                images.append(ImageRef(path=file.as_posix(), name=file.name, source="", file=file))
        if errors:
            _fail(result_obj, errors)
            return
        if not images:
            _fail(result_obj, ["No files given"])
            return

        yield (0.4, f"Uploading {len(images)} image file(s)...")
        upload_result = Uploader(config.uploader).upload(images)
        if not upload_result.success:
            _fail(result_obj, [f"Upload error: {upload_result.msg}" if upload_result.msg else "Upload error"])
            return
        urls = upload_result.result
        if len(urls) != len(images):
            _fail(result_obj, [f"Upload returned {len(urls)} URL(s) for {len(images)} file(s)"])
            return

        warnings: list[str] = []
        try:
            ledger = UploadLedger.default()
            ledger.record(images, urls)
            ledger.save()
        except (ValueError, RuntimeError) as e:
            logger.warning("Upload ledger not updated: %s", e)
            warnings.append(f"Upload ledger not updated: {e}")

        rewrite_cfg = config.rewrite
        embeds = [
            f"![{format_display_name(image.name, rewrite_cfg.image_size_suffix, rewrite_cfg.image_desc)}]({url})"
            for image, url in zip(images, urls)
        ]

        yield (1.0, "Complete")
        result_obj.output = UploadFileOutput(
            errors=[],
            warnings=warnings,
            success=True,
            urls=urls,
            embeds=embeds,
        ).model_dump(mode="python")
        result_obj.result = f"Uploaded {len(images)} image file(s)"
        result_obj.success = True

    return StageResult(
        announce=f"Uploading {len(paths)} file(s)...",
        progress_callback=do_work,
    )

"""Rewrite note API command.

CLI: imgup rewrite note <note> [--only <file name>]
"""

import logging
import posixpath
from collections.abc import Iterator

from .._output_schemas.rewrite import RewriteNoteOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_note(note: str, only: str | None = None) -> StageResult:
    """Upload every image embedded in a note and rewrite its references.

    Args:
        note: Note path, absolute or relative to the vault (or CWD inside the vault)
        only: Restrict the upload to images with this file name or vault path
    """

    def _fail(result_obj: StageResult, message: str, note_id: str = note) -> None:
        result_obj.output = RewriteNoteOutput(
            errors=[message],
            warnings=[],
            success=False,
            note=note_id,
            images=[],
            deleted=[],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.ImgupConfig import ImgupConfig
        from ..ledger.UploadLedger import UploadLedger
        from ..link.extract_image_refs import extract_image_refs
        from ..upload.Uploader import Uploader
        from ..vault.resolve_vault_path import resolve_vault_path
        from ..vault.Vault import Vault
        from ..vault.VaultPathError import VaultPathError
        from ._filter_network_refs import _filter_network_refs
        from ._find_note_images import _find_note_images
        from ._rewrite_sources import _rewrite_sources
        from .format_display_name import format_display_name

        yield (0.05, "Loading configuration...")
        try:
            config = ImgupConfig.load()
        except ValueError as e:
            _fail(result_obj, str(e))
            return
        rewrite_cfg = config.rewrite
        warnings: list[str] = []

        try:
            with Vault(config.vault) as vault:
                try:
                    note_id = resolve_vault_path(note, vault.vault_path)
                except VaultPathError as e:
                    _fail(result_obj, str(e))
                    return

                yield (0.15, f"Reading {note_id}...")
                content = vault.read_document(note_id)
                refs = _filter_network_refs(extract_image_refs(content), rewrite_cfg)
                images = _find_note_images(vault, note_id, refs)
                if only:
                    images = [
                        image
                        for image in images
                        if image.path == only or posixpath.basename(image.path) == posixpath.basename(only)
                    ]
                if not images:
                    _fail(result_obj, "Can not find image file", note_id)
                    return

                yield (0.3, f"Have found {len(images)} images, uploading...")
                upload_result = Uploader(config.uploader).upload(images)
                if not upload_result.success:
                    _fail(result_obj, f"Upload error: {upload_result.msg}" if upload_result.msg else "Upload error", note_id)
                    return
                urls = upload_result.result
                if len(urls) != len(images):
                    _fail(
                        result_obj,
                        f"Upload returned {len(urls)} URL(s) for {len(images)} file(s), note left unchanged",
                        note_id,
                    )
                    return

                try:
                    ledger = UploadLedger.default()
                    ledger.record(images, urls)
                    ledger.save()
                except (ValueError, RuntimeError) as e:
                    logger.warning("Upload ledger not updated: %s", e)
                    warnings.append(f"Upload ledger not updated: {e}")
                    ledger = None

                yield (0.8, f"Replacing links in {note_id}...")
                current = vault.read_document(note_id)
                if rewrite_cfg.check_freshness and current != content:
                    _fail(result_obj, "File has been changed, upload failure", note_id)
                    return

                def format_name(name: str) -> str:
                    return format_display_name(name, rewrite_cfg.image_size_suffix, rewrite_cfg.image_desc)

                new_content = _rewrite_sources(current, images, urls, format_name)
                if new_content != current:
                    vault.write_document(note_id, new_content)

                deleted: list[str] = []
                if rewrite_cfg.delete_source:
                    yield (0.9, "Deleting local image files...")
                    for path in dict.fromkeys(image.path for image in images if image.file is not None):
                        try:
                            vault.trash(path)
                        except OSError as e:
                            logger.warning("Failed to trash %s: %s", path, e)
                            warnings.append(f"Failed to trash {path}: {e}")
                            continue
                        deleted.append(path)
                        if ledger is not None:
                            ledger.forget_path(path)
                    if ledger is not None and deleted:
                        try:
                            ledger.save()
                        except RuntimeError as e:
                            warnings.append(str(e))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            _fail(result_obj, str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = RewriteNoteOutput(
            errors=[],
            warnings=warnings,
            success=True,
            note=note_id,
            images=[
                {"path": image.path, "name": image.name, "url": url} for image, url in zip(images, urls)
            ],
            deleted=deleted,
        ).model_dump(mode="python")
        result_obj.result = f"Uploaded {len(images)} image(s) in {note_id}"
        result_obj.success = True

    return StageResult(
        announce=f"Uploading images in {note}...",
        progress_callback=do_work,
    )

"""Rewrite download API command.

CLI: imgup rewrite download <note>
"""

import logging
import posixpath
from collections.abc import Iterator
from urllib.parse import quote

import requests  # type: ignore

from .._output_schemas.rewrite import RewriteDownloadOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_download(note: str) -> StageResult:
    """Download the network images embedded in a note into the vault.

    Each image is saved under ``rewrite.download_dir`` (the note's folder when
    empty) and its embed is rewritten to the relative path of the new file.

    Args:
        note: Note path, absolute or relative to the vault (or CWD inside the vault)
    """

    def _fail(result_obj: StageResult, message: str, note_id: str = note, warnings: list[str] | None = None) -> None:
        result_obj.output = RewriteDownloadOutput(
            errors=[message],
            warnings=warnings or [],
            success=False,
            note=note_id,
            images=[],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.ImgupConfig import ImgupConfig
        from ..link.extract_image_refs import extract_image_refs
        from ..vault.resolve_vault_path import resolve_vault_path
        from ..vault.Vault import Vault
        from ..vault.VaultPathError import VaultPathError
        from ._download_file_name import _download_file_name
        from ._download_image import _download_image
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

        def _warn(message: str) -> None:
            logger.warning(message)
            warnings.append(message)

        try:
            with Vault(config.vault) as vault:
                try:
                    note_id = resolve_vault_path(note, vault.vault_path)
                except VaultPathError as e:
                    _fail(result_obj, str(e))
                    return

                yield (0.1, f"Reading {note_id}...")
                content = vault.read_document(note_id)
                refs = [ref for ref in extract_image_refs(content) if ref.is_network]
                if not refs:
                    _fail(result_obj, "No network images found", note_id)
                    return

                note_dir = posixpath.dirname(note_id)
                folder = rewrite_cfg.download_dir.strip("/") or note_dir
                saved: dict[str, str] = {}
                images = []
                links: list[str] = []
                total = len(refs)
                for count, ref in enumerate(refs, start=1):
                    url = ref.path
                    yield (0.1 + 0.7 * count / total, f"Downloading {url} ({count}/{total})...")
                    if url not in saved:
                        try:
                            data, content_type = _download_image(url, rewrite_cfg.download_timeout_secs)
                        except requests.RequestException as e:
                            _warn(f"Failed to download {url}: {e}")
                            continue
                        name = _download_file_name(url, content_type)
                        if name is None:
                            _warn(f"{url} is not an image, skipped")
                            continue
                        stem, ext = posixpath.splitext(name)
                        file_id = posixpath.join(folder, name)
                        counter = 1
                        while (vault.vault_path / file_id).exists():
                            file_id = posixpath.join(folder, f"{stem}-{counter}{ext}")
                            counter += 1
                        vault.write_file(file_id, data)
                        logger.info("Downloaded %s to %s", url, file_id)
                        saved[url] = file_id
                    images.append(ref)
                    links.append(quote(posixpath.relpath(saved[url], note_dir or "."), safe="/"))

                if not images:
                    _fail(result_obj, "No image downloaded", note_id, warnings)
                    return

                yield (0.9, f"Replacing links in {note_id}...")
                current = vault.read_document(note_id)
                if rewrite_cfg.check_freshness and current != content:
                    _fail(result_obj, "File has been changed, download failure", note_id, warnings)
                    return

                def format_name(name: str) -> str:
                    return format_display_name(name, rewrite_cfg.image_size_suffix, rewrite_cfg.image_desc)

                new_content = _rewrite_sources(current, images, links, format_name)
                if new_content != current:
                    vault.write_document(note_id, new_content)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            _fail(result_obj, str(e), warnings=warnings)
            return

        yield (1.0, "Complete")
        result_obj.output = RewriteDownloadOutput(
            errors=[],
            warnings=warnings,
            success=True,
            note=note_id,
            images=[{"url": url, "path": file_id} for url, file_id in saved.items()],
        ).model_dump(mode="python")
        result_obj.result = f"Downloaded {len(saved)} image(s) into {folder or '/'}"
        result_obj.success = True

    return StageResult(
        announce=f"Downloading network images in {note}...",
        progress_callback=do_work,
    )

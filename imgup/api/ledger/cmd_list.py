"""Ledger list API command.

CLI: imgup ledger list
"""

from collections.abc import Iterator

from .._output_schemas.ledger import LedgerListOutput
from ..StageResult import StageResult
from .UploadLedger import UploadLedger


def cmd_list() -> StageResult:
    """List every upload recorded in the ledger."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading ledger...")
        try:
            ledger = UploadLedger.default()
        except ValueError as e:
            result_obj.output = LedgerListOutput(
                errors=[str(e)],
                warnings=[],
                entries=[],
                count=0,
                ledger_path=str(UploadLedger.default_path()),
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        entries = [entry.model_dump(mode="python") for entry in ledger.entries]
        yield (1.0, "Complete")
        result_obj.output = LedgerListOutput(
            errors=[],
            warnings=[],
            entries=entries,
            count=len(entries),
            ledger_path=str(ledger.path),
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(entries)} uploaded image(s)"
        result_obj.success = True

    return StageResult(
        announce="Listing uploaded images...",
        progress_callback=do_work,
    )

"""Config show API command.

CLI: imgup config show [section]
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ImgupConfig import ImgupConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the whole configuration's section names, or one section.

    Args:
        section: Section name (vault, uploader, rewrite, log); empty lists sections
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(ImgupConfig.get_config_path())

        yield (0.3, "Loading configuration...")
        try:
            config = ImgupConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.8, "Reading section...")
        data = config.to_dict()
        if not section:
            content = {"sections": list(data)}
        elif section in data:
            content = data[section]
        else:
            message = f"Unknown section: {section!r} (available: {list(data)})"
            result_obj.output = ConfigShowOutput(
                errors=[message],
                warnings=[],
                section=section,
                content={},
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            section=section,
            content=content,
            config_path=config_path,
        ).model_dump(mode="python")
        result_obj.result = f"Configuration loaded from {config_path}"
        result_obj.success = True

    return StageResult(
        announce=f"Showing configuration{' section ' + section if section else ''}...",
        progress_callback=do_work,
    )

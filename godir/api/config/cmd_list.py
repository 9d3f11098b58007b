"""List configuration command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigListOutput
from ..errors import GodirError
from ..StageResult import StageResult
from .get_config_path import get_config_path
from .GodirConfig import GodirConfig


def cmd_list() -> StageResult:
    """Show the persisted directory list and exclusions."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = get_config_path()
        yield (0.3, "Loading configuration...")
        try:
            config = GodirConfig.load_or_initialize(config_path)
        except GodirError as e:
            yield (1.0, "Complete")
            result_obj.result = "Configuration load failed"
            result_obj.output = ConfigListOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(config.directories)} director{'y' if len(config.directories) == 1 else 'ies'}"
        result_obj.output = ConfigListOutput(
            errors=[],
            warnings=[],
            content=config.to_dict(),
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing configuration...",
        progress_callback=do_work,
    )

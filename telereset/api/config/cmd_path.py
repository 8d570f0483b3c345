"""Config path command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .ClientConfig import ClientConfig


def cmd_path() -> StageResult:
    """Report where the configuration file lives."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Resolving home directory...")
        config_path = ClientConfig.get_config_path()
        exists = config_path.exists()
        yield (1.0, "Complete")
        result_obj.result = str(config_path) if exists else f"{config_path} (not created yet)"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(config_path),
            "home_dir": str(ClientConfig.get_home_dir()),
            "exists": exists,
        }
        result_obj.success = True

    return StageResult(announce="Locating configuration file...", progress_callback=do_work)

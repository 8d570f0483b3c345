"""Config init command."""

from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from .BackendConfig import BackendConfig
from .ClientConfig import ClientConfig


def cmd_init(base_url: str | None = None, force: bool = False) -> StageResult:
    """Write a configuration file holding the defaults.

    Args:
        base_url: Backend URL to store instead of the default
        force: Overwrite an existing configuration file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = ClientConfig.get_config_path()

        def fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "config_path": str(config_path),
                "content": {},
                "overwritten": False,
            }
            result_obj.success = False

        yield (0.3, "Checking for an existing configuration...")
        overwritten = config_path.exists()
        if overwritten and not force:
            fail(f"{config_path} already exists; use --force to overwrite it")
            return

        try:
            config = ClientConfig(backend=BackendConfig(base_url=base_url)) if base_url else ClientConfig()
        except ValidationError as e:
            fail(f"Invalid backend URL: {e.errors()[0]['msg']}")
            return

        yield (0.7, "Writing configuration...")
        try:
            config.save()
        except RuntimeError as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote configuration to {config_path}"
        result_obj.output = {
            "errors": [],
            "warnings": [f"Replaced existing {config_path}"] if overwritten else [],
            "config_path": str(config_path),
            "content": config.to_dict(),
            "overwritten": overwritten,
        }
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)

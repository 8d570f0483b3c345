"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .ClientConfig import ClientConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration, or one section of it.

    Args:
        section: Section name. Empty string shows every section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = ClientConfig.get_config_path()
        exists = config_path.exists()
        yield (0.3, "Loading configuration...")
        try:
            config = ClientConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Configuration is invalid"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": str(config_path),
                "exists": exists,
            }
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        warnings = [] if exists else [f"{config_path} does not exist; showing defaults"]

        if section and section not in config_dict:
            yield (1.0, "Complete")
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = {
                "errors": [f"Unknown section: {section}"],
                "warnings": warnings,
                "section": section,
                "content": {},
                "config_path": str(config_path),
                "exists": exists,
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'" if section else "Retrieved configuration"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "section": section,
            "content": config_dict[section] if section else config_dict,
            "config_path": str(config_path),
            "exists": exists,
        }
        result_obj.success = True

    announce = f"Showing configuration for section '{section}'..." if section else "Showing configuration..."
    return StageResult(announce=announce, progress_callback=do_work)

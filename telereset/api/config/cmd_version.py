"""Version command."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult


def cmd_version() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        version = get_package_version()
        result_obj.result = f"telereset {version}"
        result_obj.output = {"errors": [], "warnings": [], "version": version}
        result_obj.success = True

    return StageResult(announce="Checking version...", progress_callback=do_work)

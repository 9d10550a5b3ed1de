"""Alias list command."""

from collections.abc import Iterator

from ..config.DroidPatchConfig import DroidPatchConfig
from ..StageResult import StageResult
from .Alias import Alias


def cmd_list() -> StageResult:
    """List all droid-patch aliases."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = DroidPatchConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "aliases": [],
                "count": 0,
                "aliases_dir": "",
                "path_configured": False,
            }
            result_obj.success = False
            return

        yield (0.5, "Scanning alias locations...")
        with Alias(config.alias) as alias:
            aliases = alias.list_aliases()
            path_configured = alias.path_configured()

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(aliases)} alias(es)" if aliases else "No aliases configured"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "aliases": aliases,
            "count": len(aliases),
            "aliases_dir": str(config.alias.aliases_dir),
            "path_configured": path_configured,
        }
        result_obj.success = True

    return StageResult(announce="Listing droid-patch aliases...", progress_callback=do_work)

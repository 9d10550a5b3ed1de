"""Patch apply command.

Patch the droid binary and optionally install the result as an alias.
Matches CLI: droid-patch patch [--is-custom] [--skip-login] [ALIAS]
"""

import platform
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..alias.Alias import Alias
from ..config.DroidPatchConfig import DroidPatchConfig
from ..StageResult import StageResult
from .build_patches import build_patches
from .find_default_binary import find_default_binary
from .PatchEngine import PatchEngine
from .PatchRunResult import PatchRunResult


def _summarize(run: PatchRunResult) -> str:
    if run.dry_run:
        parts = []
        for r in run.results:
            if r.already_patched:
                parts.append(f"{r.name}: already patched")
            elif r.occurrences_found:
                parts.append(f"{r.name}: {r.occurrences_found} occurrence(s) will be patched")
            else:
                parts.append(f"{r.name}: pattern not found")
        return "Dry run - " + "; ".join(parts)
    if run.no_patch_needed:
        return "All patches already applied. Binary is up to date"
    if not run.output_path:
        return "No patches could be applied"
    if run.success:
        return f"Applied {run.patched_count} patch(es), all verified: {run.output_path}"
    return f"Verification failed for {run.output_path}"


def cmd_apply(
    path: str | None = None,
    alias: str | None = None,
    is_custom: bool = False,
    skip_login: bool = False,
    dry_run: bool = False,
    output_dir: str | None = None,
    backup: bool | None = None,
    verbose: bool = False,
) -> StageResult:
    """Patch the droid binary.

    Args:
        path: Path to the droid binary; first existing configured default if None
        alias: Alias name for the patched binary (required unless dry run)
        is_custom: Apply the isCustom patch
        skip_login: Apply the skipLogin patch
        dry_run: Only report what would be patched
        output_dir: With an alias, write ``<output_dir>/<alias>`` and skip alias installation
        backup: Create ``<binary>.backup``; configured default if None
        verbose: Include match previews in the results

    Returns:
        StageResult with per-patch results and alias installation details
    """
    errors: list[str] = []
    warnings: list[str] = []

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        binary_path: str = "",
        run: PatchRunResult | None = None,
        alias_info: dict[str, Any] | None = None,
    ) -> None:
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "binary_path": binary_path,
            "output_path": run.output_path if run else "",
            "dry_run": dry_run,
            "patched_count": run.patched_count if run else 0,
            "no_patch_needed": run.no_patch_needed if run else False,
            "results": [r.model_dump(mode="python") for r in run.results] if run else [],
            "alias": alias_info or {},
        }
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = DroidPatchConfig.load()
        except ValueError as e:
            errors.append(str(e))
            yield (1.0, "Complete")
            _build_result(result_obj, False, f"Configuration error: {e}")
            return

        yield (0.15, "Selecting patches...")
        patches = build_patches(is_custom=is_custom, skip_login=skip_login)
        if not patches:
            message = "No patch flags specified. Available patches: --is-custom, --skip-login"
            errors.append(message)
            yield (1.0, "Complete")
            _build_result(result_obj, False, message)
            return

        if not alias and not dry_run:
            message = "Alias name is required"
            errors.append(message)
            yield (1.0, "Complete")
            _build_result(result_obj, False, message)
            return

        binary_path = Path(path) if path else find_default_binary(config.patch.default_paths)
        output_path = Path(output_dir) / alias if output_dir and alias else None
        do_backup = config.patch.backup if backup is None else backup

        yield (0.3, f"Patching {binary_path}...")
        engine = PatchEngine()
        try:
            run = engine.run(
                binary_path,
                patches,
                output_path=output_path,
                dry_run=dry_run,
                backup=do_backup,
                verbose=verbose,
            )
        except OSError as e:
            errors.append(str(e))
            yield (1.0, "Complete")
            _build_result(result_obj, False, f"Error: {e}", binary_path=str(binary_path))
            return

        for r in run.results:
            if not r.success and not r.already_patched:
                warnings.append(f"{r.name}: pattern not found")

        if dry_run or not run.success:
            if not run.success and not dry_run:
                errors.append(_summarize(run))
            yield (1.0, "Complete")
            _build_result(result_obj, run.success, _summarize(run), binary_path=str(binary_path), run=run)
            return

        if output_dir or not alias:
            if platform.system() == "Darwin" and not run.no_patch_needed:
                warnings.append(f"You may need to re-sign: codesign --force --deep --sign - {run.output_path}")
                warnings.append(f"Or remove quarantine: xattr -cr {run.output_path}")
            yield (1.0, "Complete")
            _build_result(result_obj, True, _summarize(run), binary_path=str(binary_path), run=run)
            return

        yield (0.8, f"Creating alias {alias}...")
        try:
            with Alias(config.alias) as alias_api:
                alias_info = alias_api.install(Path(run.output_path), alias)
        except (OSError, ValueError) as e:
            errors.append(str(e))
            yield (1.0, "Complete")
            _build_result(
                result_obj, False, f"Error creating alias: {e}", binary_path=str(binary_path), run=run
            )
            return

        warnings.extend(alias_info.get("warnings", []))
        yield (1.0, "Complete")
        message = f"{_summarize(run)}; alias '{alias}' -> {alias_info['alias_path']}"
        _build_result(result_obj, True, message, binary_path=str(binary_path), run=run, alias_info=alias_info)

    return StageResult(
        announce="Patching droid binary..." if not dry_run else "Checking droid binary (dry run)...",
        progress_callback=do_work,
    )

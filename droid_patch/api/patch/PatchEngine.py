"""Patch engine - in-place fixed-length byte substitution with backup and verification."""

import shutil
from collections.abc import Sequence
from pathlib import Path

from ...utils.logger import get_logger
from .find_all_positions import find_all_positions
from .get_context import get_context
from .Patch import Patch
from .PatchResult import PatchResult
from .PatchRunResult import PatchRunResult

# Number of match previews collected per patch in verbose mode
_MAX_CONTEXTS = 5


class PatchEngine:
    """Scan a binary for patch patterns, write the patched copy and verify it.

    Patterns of different patches must not overlap inside the file; such input is
    unsupported and the verification pass reports it as a failure.
    """

    def __init__(self) -> None:
        self.logger = get_logger("patch.engine")

    @staticmethod
    def backup_path_for(input_path: Path) -> Path:
        """Backup location for a given input binary."""
        return input_path.with_name(input_path.name + ".backup")

    @staticmethod
    def default_output_path(input_path: Path) -> Path:
        """Output location used when the caller gives none."""
        return input_path.with_name(input_path.name + ".patched")

    def scan(self, buffer: bytes, patch: Patch, verbose: bool = False) -> PatchResult:
        """Find every occurrence of one patch's pattern in ``buffer``."""
        positions = find_all_positions(buffer, patch.pattern)

        if not positions:
            replacement_positions = find_all_positions(buffer, patch.replacement)
            if replacement_positions:
                self.logger.info(
                    f"{patch.name}: pattern not found, {len(replacement_positions)} patched occurrence(s) present"
                )
                return PatchResult(name=patch.name, already_patched=True, success=True)
            self.logger.warning(f"{patch.name}: neither pattern nor replacement found")
            return PatchResult(name=patch.name, success=False)

        self.logger.info(f"{patch.name}: found {len(positions)} occurrence(s)")
        contexts: list[str] = []
        if verbose:
            for pos in positions[:_MAX_CONTEXTS]:
                preview = f"@ 0x{pos:08x}: ...{get_context(buffer, pos, len(patch.pattern))}..."
                self.logger.debug(f"{patch.name} {preview}")
                contexts.append(preview)

        return PatchResult(
            name=patch.name,
            occurrences_found=len(positions),
            positions=positions,
            success=True,
            contexts=contexts,
        )

    def _overwrite(self, buffer: bytearray, position: int, replacement: bytes) -> None:
        buffer[position : position + len(replacement)] = replacement

    def apply(self, buffer: bytes, patches: Sequence[Patch], results: Sequence[PatchResult]) -> tuple[bytearray, int]:
        """Return a patched copy of ``buffer`` and the number of replacements written."""
        patched = bytearray(buffer)
        total = 0
        for patch, result in zip(patches, results):
            for pos in result.positions:
                self._overwrite(patched, pos, patch.replacement)
                total += 1
        return patched, total

    def verify(self, output_path: Path, patches: Sequence[Patch], results: Sequence[PatchResult]) -> bool:
        """Re-read the written file and record remaining/replaced counts per patch."""
        data = output_path.read_bytes()
        all_verified = True
        for patch, result in zip(patches, results):
            result.remaining_after = len(find_all_positions(data, patch.pattern))
            result.replacements_after = len(find_all_positions(data, patch.replacement))

            if result.remaining_after:
                self.logger.error(f"{patch.name}: {result.remaining_after} occurrence(s) not patched")
                result.success = False
                all_verified = False
            elif result.replacements_after < result.occurrences_found:
                self.logger.error(
                    f"{patch.name}: expected at least {result.occurrences_found} patched occurrence(s), "
                    f"found {result.replacements_after}"
                )
                result.success = False
                all_verified = False
            else:
                self.logger.info(f"{patch.name}: verified ({result.replacements_after} patched)")
        return all_verified

    def run(
        self,
        input_path: Path | str,
        patches: Sequence[Patch],
        output_path: Path | str | None = None,
        dry_run: bool = False,
        backup: bool = True,
        verbose: bool = False,
    ) -> PatchRunResult:
        """Patch ``input_path`` and write the result.

        Raises:
            FileNotFoundError: If ``input_path`` is not an existing file
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            raise FileNotFoundError(f"Binary not found: {input_path}")

        final_output = Path(output_path) if output_path else self.default_output_path(input_path)

        buffer = input_path.read_bytes()
        self.logger.info(f"Read {input_path} ({len(buffer) / (1024 * 1024):.2f} MB)")

        results = [self.scan(buffer, patch, verbose=verbose) for patch in patches]

        if dry_run:
            return PatchRunResult(
                success=all(r.success or r.already_patched for r in results),
                dry_run=True,
                results=results,
            )

        if not any(r.occurrences_found > 0 and not r.already_patched for r in results):
            if results and all(r.already_patched for r in results):
                self.logger.info("All patches already applied")
                return PatchRunResult(
                    success=True,
                    output_path=str(input_path),
                    results=results,
                    no_patch_needed=True,
                )
            self.logger.warning("No patches could be applied")
            return PatchRunResult(success=False, results=results)

        if backup:
            backup_path = self.backup_path_for(input_path)
            if not backup_path.exists():
                shutil.copyfile(input_path, backup_path)
                self.logger.info(f"Created backup: {backup_path}")
            else:
                self.logger.info(f"Backup already exists: {backup_path}")

        patched, total = self.apply(buffer, patches, results)
        self.logger.info(f"Applied {total} replacement(s)")

        final_output.write_bytes(bytes(patched))
        final_output.chmod(0o755)
        self.logger.info(f"Patched binary saved: {final_output}")

        verified = self.verify(final_output, patches, results)

        return PatchRunResult(
            success=verified,
            output_path=str(final_output),
            results=results,
            patched_count=total,
            verified=verified,
        )

"""
Formatting service — the bridge between hosts and the region pipeline.

Manages:
- The formatting pipeline (extract → dispatch → splice-and-diff)
- Option resolution, fresh for every pass
- File-level helpers: format a file, optionally write the result back

A pass is stateless end-to-end: one Document snapshot in, one edit list
out.  Nothing is carried over between passes.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from core import Document, Edit, FormatOutcome, FormattingOptions, OutcomeStatus, Region, SpliceMismatchError
from formatters import FormatterEngines, default_engines
from infrastructure import (
    ConfigResolver,
    EnvironmentSettings,
    apply_edits,
    extract_regions,
    format_region,
    get_handler,
    load_document,
    save_text,
    synthesize,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


class FormatPipeline:
    """
    Pure pipeline from (document, options) to edits.

    Regions have no data dependency on each other, so with more than one
    region and ``max_workers > 1`` they are formatted on a thread pool.
    Results are always returned in document order.
    """

    def __init__(self, engines: FormatterEngines, max_workers: int = DEFAULT_MAX_WORKERS):
        self._engines = engines
        self._max_workers = max(1, max_workers)

    def outcomes(self, document: Document, options: FormattingOptions) -> list[FormatOutcome]:
        """Format every region once and return the per-region outcomes."""
        regions = extract_regions(document)
        if len(regions) > 1 and self._max_workers > 1:
            workers = min(self._max_workers, len(regions))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sfc-format") as pool:
                results = list(pool.map(lambda region: self._format_one(region, options), regions))
        else:
            results = [self._format_one(region, options) for region in regions]
        return sorted(results, key=lambda outcome: outcome.region.span.start_line)

    def run(self, document: Document, options: FormattingOptions) -> list[Edit]:
        """Return edits for the regions whose formatting changed them."""
        return [outcome.to_edit() for outcome in self.outcomes(document, options) if outcome.changed]

    def _format_one(self, region: Region, options: FormattingOptions) -> FormatOutcome:
        formatted = format_region(region, options, self._engines)
        try:
            outcome = synthesize(region, formatted, get_handler(region.kind).splices_content)
        except SpliceMismatchError as exc:
            logger.warning("Leaving %s region at line %d untouched: %s",
                           region.kind.value, region.span.start_line + 1, exc)
            return FormatOutcome(region, formatted or "", OutcomeStatus.FAILED)
        logger.debug("%s region at line %d: %s",
                     region.kind.value, region.span.start_line + 1, outcome.status.value)
        return outcome


class FormattingService:
    """
    Facade that hosts call.  One instance per application.
    """

    def __init__(
        self,
        engines: Optional[FormatterEngines] = None,
        environment: Optional[EnvironmentSettings] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._pipeline = FormatPipeline(engines or default_engines(), max_workers)
        self._environment = environment if environment is not None else EnvironmentSettings.from_environ()

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def resolve_options(
        self,
        project_root: Union[str, Path, None] = None,
        settings: Optional[EnvironmentSettings] = None,
    ) -> FormattingOptions:
        """Resolve options as a pass would; *settings* layer over the environment."""
        environment = self._environment
        if settings is not None:
            environment = environment.merged_with(settings.prettier, settings.html_format)
        return ConfigResolver(project_root, environment).resolve()

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def format_document(
        self,
        document: Document,
        project_root: Union[str, Path, None] = None,
        settings: Optional[EnvironmentSettings] = None,
    ) -> list[Edit]:
        """Run one formatting pass over *document* and return its edits."""
        options = self.resolve_options(project_root, settings)
        edits = self._pipeline.run(document, options)
        logger.info("Formatted %s: %d edit(s)", document.file_path or "<memory>", len(edits))
        return edits

    def outcomes(
        self,
        document: Document,
        project_root: Union[str, Path, None] = None,
        settings: Optional[EnvironmentSettings] = None,
    ) -> list[FormatOutcome]:
        options = self.resolve_options(project_root, settings)
        return self._pipeline.outcomes(document, options)

    def format_text(
        self,
        text: str,
        project_root: Union[str, Path, None] = None,
        settings: Optional[EnvironmentSettings] = None,
    ) -> dict:
        """Format in-memory text and return edits plus the formatted text."""
        document = Document(text)
        edits = self.format_document(document, project_root, settings)
        return {
            "edits": [self._serialize_edit(e) for e in edits],
            "text": apply_edits(document, edits),
            "changed": bool(edits),
        }

    def format_file(
        self,
        file_path: Union[str, Path],
        project_root: Union[str, Path, None] = None,
        write: bool = False,
    ) -> dict:
        """Format a file.  The project root defaults to the file's directory.

        With *write* the formatted text replaces the file content, but
        only when at least one region changed.
        """
        path = Path(file_path)
        document = load_document(path)
        edits = self.format_document(document, project_root or path.parent)
        written = False
        if write and edits:
            save_text(path, apply_edits(document, edits))
            written = True
            logger.info("Wrote %s", path)
        return {
            "file_path": str(path),
            "edits": [self._serialize_edit(e) for e in edits],
            "changed": bool(edits),
            "written": written,
        }

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _serialize_edit(edit: Edit) -> dict[str, Any]:
        return {
            "start_line": edit.span.start_line,
            "end_line": edit.span.end_line,
            "replacement_text": edit.replacement_text,
        }

    @staticmethod
    def serialize_options(options: FormattingOptions) -> Mapping[str, Any]:
        return options.to_dict()

"""Create command implementation for the CLI."""

from __future__ import annotations

from typing import final

from omyb.application.services import OutlineResult, OutlineService, OutlineServiceRequest
from omyb.ui.cli.args.options import CreateArgs
from omyb.ui.cli.display.result import OutlineResultDisplay


@final
class CreateCommand:
    """Command that writes the outline document for one or more roots."""

    def __init__(self, args: CreateArgs) -> None:
        self.args = args
        self.service = OutlineService()
        self.display = OutlineResultDisplay()

    def execute(self) -> OutlineResult:
        """Execute the create command."""

        request = OutlineServiceRequest(
            source_roots=self.args.source_dirs,
            output_dir=self.args.output_dir,
            ignore=self.args.ignore,
            include_unnumbered_directories=self.args.include_unnumbered_directories,
            include_directory_content_without_section=self.args.include_directory_content_without_section,
            relative_links=self.args.relative_links,
        )
        result = self.service.generate(request)
        self.display.show_result(result, quiet=self.args.quiet)
        return result

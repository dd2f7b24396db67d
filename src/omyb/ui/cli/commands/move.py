"""Move command implementation for the CLI."""

from __future__ import annotations

from typing import final

from omyb.application.services import RelocateOutcome, RelocateService, RelocateServiceRequest
from omyb.features.naming import EntryKind
from omyb.ui.cli.args.options import MoveArgs
from omyb.ui.cli.display.result import RelocationResultDisplay


@final
class MoveCommand:
    """Command that relocates a file (``mv``) or directory (``mv-dir``)."""

    def __init__(self, args: MoveArgs) -> None:
        self.args = args
        self.service = RelocateService()
        self.display = RelocationResultDisplay()

    def execute(self) -> RelocateOutcome:
        """Execute the move command."""

        expected_kind = EntryKind.DIRECTORY if self.args.command == "mv-dir" else EntryKind.FILE
        request = RelocateServiceRequest(
            source_path=self.args.source_path,
            destination_dir=self.args.destination_dir,
            target_index=self.args.index,
            prefix_width=self.args.width,
            dry_run=self.args.dry_run,
            expected_kind=expected_kind,
            outline_root=self.args.book_root if self.args.update_summary else None,
            ignore=self.args.ignore,
        )
        outcome = self.service.run(request)
        self.display.show_outcome(outcome, quiet=self.args.quiet)
        return outcome

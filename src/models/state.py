"""
Run state model

RunState carries the verbosity used by LOG() plus counters the driver helpers
update as documents flow through a postprocessor chain.
"""

from typing import TYPE_CHECKING, Optional, Type, TypeVar
from dataclasses import dataclass, field

from .context import PostprocessorResult

# Forward reference for type hint - avoid importing config into models
if TYPE_CHECKING:
    from ..config.settings import AppSettings


RS = TypeVar("RS", bound="RunState")


@dataclass
class RunState:
    """
    State shared across the documents of one run.

    Attributes:
        verbosity: Logging verbosity level (0-3); see lib.log.LOG
        documents_processed: Documents that went through the chain
        documents_skipped: Documents a postprocessor asked to skip
        documents_stopped: Documents whose chain stopped early but are still emitted
        document: Destination (or name) of the document currently being processed;
                  LOG() tags every record with it
    """

    verbosity: int = field(default=1)
    documents_processed: int = field(default=0)
    documents_skipped: int = field(default=0)
    documents_stopped: int = field(default=0)
    document: Optional[str] = field(default=None)

    @classmethod
    def state_createFromSettings(cls: Type[RS], settings: "AppSettings") -> RS:
        """
        Create RunState using the verbosity configured in AppSettings.

        Args:
            settings: AppSettings instance

        Returns:
            Fresh RunState with zeroed counters
        """
        return cls(verbosity=settings.verbosity)

    def result_record(self, result: PostprocessorResult) -> None:
        """Update counters for one finished document"""
        self.documents_processed += 1
        if result is PostprocessorResult.STOP_AND_SKIP_NOTE:
            self.documents_skipped += 1
        elif result is PostprocessorResult.STOP_HERE:
            self.documents_stopped += 1

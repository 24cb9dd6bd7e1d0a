"""
Per-document context and postprocessor control signals

A Context carries what the driver knows about the document being processed:
its parsed frontmatter, where it is going to be written, and a free-form
annotations dict postprocessors may use to leave notes for the driver.
"""

from enum import Enum
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

import yaml


TAGS_KEY = "tags"


class FrontmatterError(Exception):
    """Raised when frontmatter text cannot be parsed as YAML"""
    pass


class PostprocessorResult(Enum):
    """
    Control signal returned by every postprocessor

    CONTINUE:           run the next postprocessor, then render
    STOP_HERE:          skip remaining postprocessors but still emit the document
    STOP_AND_SKIP_NOTE: skip remaining postprocessors and do not emit the document
    """
    CONTINUE = "continue"
    STOP_HERE = "stop_here"
    STOP_AND_SKIP_NOTE = "stop_and_skip_note"


@dataclass
class Context:
    """
    Document context handed to every postprocessor

    Attributes:
        frontmatter: Parsed frontmatter mapping (keys are strings, values are
                     whatever the YAML held: scalars, sequences, mappings, None)
        destination: Where the driver intends to write the document, if known
        annotations: Side channel for postprocessors to report back to the driver
    """
    frontmatter: Dict[str, Any] = field(default_factory=dict)
    destination: Optional[Path] = field(default=None)
    annotations: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def context_fromYAML(cls, text: str, destination: Optional[Path] = None) -> "Context":
        """
        Build a context from raw frontmatter YAML

        Args:
            text: YAML source (without the surrounding --- fences)
            destination: Optional output path for the document

        Returns:
            Context with the parsed mapping as frontmatter. Empty YAML, or YAML
            whose top level is not a mapping, yields empty frontmatter.

        Raises:
            FrontmatterError: If the YAML does not parse
        """
        try:
            data: Any = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise FrontmatterError(f"Failed to parse frontmatter: {e}") from e

        if not isinstance(data, dict):
            data = {}
        return cls(frontmatter=data, destination=destination)

    def tags_get(self) -> FrozenSet[str]:
        """
        Return the document's tag set

        The `tags` key counts only when it holds a sequence; its string members
        are the tags. Absent, null, scalar or mapping values all mean "no tags".

        Example:
            tags: [draft, publish]  ->  frozenset({"draft", "publish"})
            tags: draft             ->  frozenset()
        """
        value = self.frontmatter.get(TAGS_KEY)
        if not isinstance(value, (list, tuple)):
            return frozenset()
        return frozenset(item for item in value if isinstance(item, str))

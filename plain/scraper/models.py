"""Data models for the extraction pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List


class TagKind(enum.Enum):
    """How a matched element is formatted."""

    PARAGRAPH = "paragraph"
    HEADER = "header"
    OTHER = "other"


@dataclass(frozen=True)
class MatchedElement:
    """A selected HTML element, reduced to what the formatter needs."""

    kind: TagKind
    name: str
    text: str


@dataclass
class PlainDocument:
    """Result of running the whole pipeline against one URL."""

    url: str
    text: str = ""
    segments: List[str] = field(default_factory=list)
    errors: List[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """``True`` when fetching and extraction both succeeded."""
        return not self.errors

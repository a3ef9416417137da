# src/filemap64/models.py
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class OutcomeStatus(str, Enum):
    INCLUDED = "included"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    NOT_FOUND = "not found"
    IS_DIRECTORY = "is a directory"
    READ_ERROR = "read error"
    RELATIVE_PATH_ERROR = "relative path error"
    TRAVERSAL_ERROR = "traversal error"
    EXCLUDED = "excluded"
    COMPRESSION_ERROR = "compression error"
    OVERWRITTEN = "overwritten"


@dataclass(frozen=True)
class SourceItem:
    """Immutable data class holding a collected file."""
    identifier: str
    path: Path
    content: bytes


@dataclass(frozen=True)
class ItemOutcome:
    """What happened to one visited entry."""
    path: str
    status: OutcomeStatus
    identifier: Optional[str] = None
    reason: Optional[SkipReason] = None
    detail: str = ""

    @classmethod
    def included(cls, path, identifier: str) -> "ItemOutcome":
        return cls(path=str(path), status=OutcomeStatus.INCLUDED, identifier=identifier)

    @classmethod
    def skipped(cls, path, reason: SkipReason, detail: str = "", identifier: Optional[str] = None) -> "ItemOutcome":
        return cls(path=str(path), status=OutcomeStatus.SKIPPED, identifier=identifier, reason=reason, detail=detail)

    @property
    def is_skipped(self) -> bool:
        return self.status is OutcomeStatus.SKIPPED


@dataclass
class CollectionResult:
    items: Dict[str, SourceItem] = field(default_factory=dict)
    outcomes: List[ItemOutcome] = field(default_factory=list)
    # identifier -> index of its INCLUDED outcome
    _included_at: Dict[str, int] = field(default_factory=dict, repr=False)

    def add(self, item: SourceItem) -> None:
        # Later identifiers overwrite earlier ones
        earlier = self._included_at.get(item.identifier)
        if earlier is not None:
            previous = self.outcomes[earlier]
            self.outcomes[earlier] = ItemOutcome.skipped(
                previous.path, SkipReason.OVERWRITTEN, f"overwritten by {item.path}", identifier=item.identifier
            )
        self.items[item.identifier] = item
        self._included_at[item.identifier] = len(self.outcomes)
        self.outcomes.append(ItemOutcome.included(item.path, item.identifier))

    def skip(self, path, reason: SkipReason, detail: str = "") -> None:
        self.outcomes.append(ItemOutcome.skipped(path, reason, detail))


@dataclass(frozen=True)
class EncodeResult:
    output: str
    file_map: Dict[str, str]
    document: str
    outcomes: List[ItemOutcome]

    @property
    def skipped(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.is_skipped]

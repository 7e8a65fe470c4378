"""Data models used throughout critiqueboard."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class ProcessedPoint:
    """Normalized view of one critique or decision string."""
    original: str
    simplified: str
    stems: list[str]
    key: str  # sorted stems of `simplified`, used as a coarse equality bucket


@dataclass
class StickyNote:
    """A note on the board, identified by its id."""
    id: str
    content: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StickyNote":
        return cls(id=str(data.get("id", "")), content=str(data.get("content", "")))


@dataclass
class Connection:
    """A connector between two notes, referencing them by text content."""
    from_: str
    to: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Connection":
        return cls(from_=str(data.get("from", "")), to=str(data.get("to", "")))


@dataclass
class DecisionTreeNode:
    """A node of the decision forest built from notes and connectors."""
    content: str
    id: str | None = None
    children: list["DecisionTreeNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": self.content, "id": self.id}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class DesignTheme:
    """A theme identified across design proposals and dialogue."""
    name: str
    color: str
    description: str = ""
    related_points: list[str] = field(default_factory=list)


@dataclass
class AnalysisRecord:
    """One critique session: the decisions sent and the points received."""
    decisions: list[str]
    full: list[str] = field(default_factory=list)
    simplified: list[str] = field(default_factory=list)
    design_challenge: str = ""
    tone: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisRecord":
        analysis = data.get("analysis") or {}
        return cls(
            decisions=list(data.get("decisions") or []),
            full=list(data.get("full") or analysis.get("full") or []),
            simplified=list(data.get("simplified") or analysis.get("simplified") or []),
            design_challenge=data.get("design_challenge") or data.get("designChallenge") or "",
            tone=data.get("tone") or "",
            timestamp=data.get("timestamp") or "",
        )

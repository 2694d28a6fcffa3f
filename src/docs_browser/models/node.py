"""Domain models for the documentation browser."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Whether a navigation node is a category or a document."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class NavNode:
    """A category (directory) or document (file) in the corpus tree."""

    name: str
    kind: NodeKind
    path: str
    children: tuple["NavNode", ...] = ()

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "type": self.kind.value, "path": self.path}
        if self.is_directory:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavNode":
        kind = NodeKind(data["type"])
        children = tuple(cls.from_dict(c) for c in data.get("children", ()))
        return cls(name=data["name"], kind=kind, path=data["path"], children=children)


@dataclass(frozen=True)
class WalkFailure:
    """A subtree that could not be listed."""

    path: str
    reason: str


@dataclass(frozen=True)
class TreeResult:
    """Navigation forest plus the subtrees that failed along the way."""

    nodes: tuple[NavNode, ...]
    failures: tuple[WalkFailure, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class DocumentRecord:
    """A resolved document: its title and rendered HTML body."""

    title: str
    content: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "content": self.content, "path": self.path}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentRecord":
        return cls(title=data["title"], content=data["content"], path=data["path"])


@dataclass(frozen=True)
class SearchHit:
    """One matching line with its document context."""

    file: str
    line: int
    content: str
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "line": self.line, "content": self.content, "title": self.title}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchHit":
        return cls(
            file=data["file"],
            line=int(data["line"]),
            content=data["content"],
            title=data["title"],
        )


@dataclass(frozen=True)
class Breadcrumb:
    """A single segment of a document's breadcrumb trail."""

    label: str
    path: str
    is_last: bool = False

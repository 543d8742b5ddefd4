# src/gedcom_reader/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from gedcom_reader.core.exceptions import InvalidLevelError
from .line_assembler import Line


@dataclass
class LineTree:
    """
    A ``Line`` plus its ordered child trees.

    Every child's line level is the parent's level + 1.

    Attributes:
        line: The source line of this node.
        children: Nested LineTree list ordered as they appeared.
    """

    line: Line
    children: List["LineTree"] = field(default_factory=list)

    # ---------- Line shortcuts ----------

    @property
    def level(self) -> int:
        return self.line.level

    @property
    def tag(self) -> str:
        return self.line.tag

    @property
    def xref(self) -> Optional[str]:
        return self.line.xref

    @property
    def value(self) -> Optional[str]:
        return self.line.value

    @property
    def lineno(self) -> int:
        return self.line.lineno

    # ---------- Helper Methods ----------

    def add_child(self, child: "LineTree") -> None:
        self.children.append(child)

    def find_children(self, tag: str) -> List["LineTree"]:
        """Return all direct children of this node with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["LineTree"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def first_value(self, tag: str) -> Optional[str]:
        child = self.find_first(tag)
        return child.value if child is not None else None

    def iter_subtree(self) -> Iterator["LineTree"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        ptr = f" {self.xref}" if self.xref else ""
        return f"<LineTree {self.level}{ptr} {self.tag}: {self.value!r} children={len(self.children)}>"


# ---------- GROUPING IMPLEMENTATION ----------

def check_level_step(line: Line, last_level: int) -> None:
    """Reject a line nested more than one level below its predecessor."""
    if line.level > last_level + 1:
        raise InvalidLevelError(
            f"level jumped from {last_level} to {line.level} without intermediate parent",
            lineno=line.lineno,
            tag=line.tag,
        )


def build_line_tree(lines: Sequence[Line]) -> LineTree:
    """
    Arrange one record's flat lines into a tree.

    Single left-to-right pass over ``lines`` keeping a stack of
    ``(level, node)`` pairs: a line at depth d is attached to the most
    recent stack entry at depth d-1 after popping every entry at depth >= d.

    The first line is the root. Depth steps are assumed to have been
    checked already (see ``check_level_step``).
    """
    if not lines:
        raise ValueError("cannot build a tree from an empty line group")

    root = LineTree(line=lines[0])
    stack: List[Tuple[int, LineTree]] = [(lines[0].level, root)]

    for line in lines[1:]:
        node = LineTree(line=line)

        while stack and stack[-1][0] >= line.level:
            stack.pop()

        if not stack or stack[-1][0] != line.level - 1:
            raise InvalidLevelError(
                f"no parent at level {line.level - 1} for line at level {line.level}",
                lineno=line.lineno,
                tag=line.tag,
            )

        stack[-1][1].add_child(node)
        stack.append((line.level, node))

    return root


def reconstruct_text(node: LineTree) -> str:
    """
    Join a node's value with its CONC / CONT continuation children.

        CONC -> appended directly (no newline)
        CONT -> appended after a newline
    """
    parts: List[str] = [node.value or ""]

    for child in node.children:
        if child.tag == "CONC":
            parts.append(child.value or "")
        elif child.tag == "CONT":
            parts.append("\n")
            parts.append(child.value or "")

    return "".join(parts)

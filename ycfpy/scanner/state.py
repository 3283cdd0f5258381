"""Scan state: the stack of open regions."""

from dataclasses import dataclass, field

from ycfpy.scanner.rules import LeafRule, RegionRule
from ycfpy.scanner.span import Span


@dataclass(slots=True)
class OpenRegion:
    """A region whose end delimiter has not been seen yet.

    The document body is the bottom frame, with `rule` set to None.
    """

    rule: RegionRule | None
    start: int
    alternatives: tuple[LeafRule, ...]
    children: list[Span] = field(default_factory=list)
    # Start of the current run of characters no rule matched.
    skipped_start: int | None = None

    @property
    def region(self) -> RegionRule:
        if self.rule is None:
            raise RuntimeError("The document body is not a region")
        return self.rule


class ScanState:
    """Open-region stack for a single scan; depth equals current nesting depth."""

    def __init__(self, document: OpenRegion) -> None:
        if document.rule is not None:
            raise ValueError("The bottom frame must be the document body")
        self._stack: list[OpenRegion] = [document]

    @property
    def top(self) -> OpenRegion:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of open regions, not counting the document body."""
        return len(self._stack) - 1

    def open_rules(self) -> tuple[RegionRule, ...]:
        return tuple(frame.rule for frame in self._stack[1:] if frame.rule is not None)

    def push(self, frame: OpenRegion) -> None:
        if frame.rule is None:
            raise ValueError("Only region frames can be pushed")
        self._stack.append(frame)

    def pop(self) -> OpenRegion:
        if len(self._stack) == 1:
            raise RuntimeError("pop called with no open region")
        return self._stack.pop()

    def finish(self) -> OpenRegion:
        """Hand back the document frame once every region is closed."""
        if self.depth:
            raise RuntimeError("Cannot finish scan: unclosed regions remain on stack")
        return self._stack[0]

"""Scanner."""

import re

from ycfpy.diagnostics import Diagnostic
from ycfpy.diagnostics.codes import SCANNER_UNRECOGNIZED_CHARACTER
from ycfpy.scanner.categories import SpanCategory
from ycfpy.scanner.options import ScannerOptions
from ycfpy.scanner.rules import YCF_GRAMMAR, Grammar, MatchRule, RegionRule
from ycfpy.scanner.span import Span
from ycfpy.scanner.state import OpenRegion, ScanState
from ycfpy.text import TextRange


class Scanner:
    """Classifies one source string into a span forest.

    Nesting lives on the explicit `ScanState` stack, so input depth is not
    limited by the interpreter's recursion limit. The scan never fails: text no
    rule claims is skipped one character at a time, and regions still open at
    end of input are closed there.
    """

    def __init__(
        self,
        source: str,
        *,
        grammar: Grammar = YCF_GRAMMAR,
        options: ScannerOptions | None = None,
    ) -> None:
        self._source = source
        self._grammar = grammar
        self._options = options if options is not None else ScannerOptions()
        self._diagnostics: list[Diagnostic] = []
        self._spans: tuple[Span, ...] | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Advisory diagnostics, ordered by range."""
        return self._diagnostics

    def scan(self) -> tuple[Span, ...]:
        if self._spans is not None:
            return self._spans

        source = self._source
        length = len(source)
        state = ScanState(
            OpenRegion(
                rule=None,
                start=0,
                alternatives=self._grammar.alternatives(self._grammar.top_level),
            )
        )

        position = 0
        while True:
            frame = state.top
            if frame.rule is not None:
                end = frame.rule.end.match(source, position)
                if end is not None:
                    position = self._close_region(state, end)
                    continue

            if position >= length:
                break

            advanced = self._step(state, position)
            if advanced is None:
                if frame.skipped_start is None:
                    frame.skipped_start = position
                position += 1
            else:
                position = advanced

        while state.depth:
            self._close_unterminated(state)
        document = state.finish()
        self._flush_skipped(document, length)

        self._diagnostics.sort(key=lambda diagnostic: diagnostic.range)
        self._spans = tuple(document.children)
        return self._spans

    def _step(self, state: ScanState, position: int) -> int | None:
        """Try the open frame's rules in order; commit to the first match."""
        frame = state.top
        for rule in frame.alternatives:
            match rule:
                case MatchRule():
                    found = rule.pattern.match(self._source, position)
                    if found is None:
                        continue
                    _require_progress(rule.name, found)
                    self._flush_skipped(frame, position)
                    frame.children.append(self._match_span(rule, found))
                    if rule.diagnostic is not None:
                        self._diagnostics.append(rule.diagnostic.at(_range(found)))
                    return found.end()
                case RegionRule():
                    found = rule.begin.match(self._source, position)
                    if found is None:
                        continue
                    _require_progress(rule.name, found)
                    self._flush_skipped(frame, position)
                    state.push(
                        OpenRegion(
                            rule=rule,
                            start=position,
                            alternatives=self._grammar.alternatives(rule.body),
                            children=[Span(rule.begin_category, _range(found))],
                        )
                    )
                    return found.end()
        return None

    def _match_span(self, rule: MatchRule, found: re.Match[str]) -> Span:
        children: list[Span] = []
        for capture in rule.captures:
            if capture.group is not None:
                start, end = found.span(capture.group)
                if start >= 0:
                    children.append(Span(capture.category, TextRange._from_offsets(start, end)))
            elif capture.pattern is not None:
                for sub in capture.pattern.finditer(self._source, found.start(), found.end()):
                    children.append(Span(capture.category, _range(sub)))
        children.sort(key=lambda span: span.range)
        return Span(rule.category, _range(found), tuple(children))

    def _close_region(self, state: ScanState, end: re.Match[str]) -> int:
        frame = state.pop()
        rule = frame.region
        self._flush_skipped(frame, end.start())
        frame.children.append(Span(rule.end_category, _range(end)))
        state.top.children.append(
            Span(rule.category, TextRange._from_offsets(frame.start, end.end()), tuple(frame.children))
        )
        return end.end()

    def _close_unterminated(self, state: ScanState) -> None:
        length = len(self._source)
        frame = state.pop()
        rule = frame.region
        self._flush_skipped(frame, length)
        span = Span(rule.category, TextRange._from_offsets(frame.start, length), tuple(frame.children))
        state.top.children.append(span)
        if rule.unterminated is not None:
            self._diagnostics.append(rule.unterminated.at(span.range))

    def _flush_skipped(self, frame: OpenRegion, position: int) -> None:
        start = frame.skipped_start
        if start is None:
            return
        frame.skipped_start = None
        if frame.rule is not None and frame.rule.opaque:
            return

        if self._options.emit_unclassified:
            frame.children.append(Span(SpanCategory.UNCLASSIFIED, TextRange._from_offsets(start, position)))

        if self._options.report_unrecognized:
            run = self._source[start:position]
            stripped = run.strip()
            if stripped:
                offset = start + run.index(stripped)
                self._diagnostics.append(
                    SCANNER_UNRECOGNIZED_CHARACTER.at(TextRange._from_offsets(offset, offset + len(stripped)))
                )


def _range(found: re.Match[str]) -> TextRange:
    return TextRange._from_offsets(found.start(), found.end())


def _require_progress(name: str, found: re.Match[str]) -> None:
    if found.end() == found.start():
        raise RuntimeError(f"Rule {name!r} matched the empty string at {found.start()}")


def dump_spans(spans: tuple[Span, ...], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print the span tree with category, range and text for debugging."""

    def walk(span: Span, depth: int) -> None:
        text = span.text(source)
        print(f"{'  ' * depth}{span.category.value:<18} range={span.range.as_tuple()} text={text!r}")
        for child in span.children:
            walk(child, depth + 1)

    for span in spans:
        walk(span, 0)

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")

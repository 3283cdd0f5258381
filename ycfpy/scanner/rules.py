"""Grammar rules and the YCF rule table.

A grammar is a flat table of named rules drawn from a closed union:

- `MatchRule`: one regex producing one span (plus captured child spans).
- `RegionRule`: begin delimiter, a body tried repeatedly, end delimiter.
- `IncludeRule`: an ordered list of other rules, tried in declaration order.

Rules refer to each other by name, so regions can recurse into bodies that
contain themselves (arrays of arrays, maps of maps) without the table being
recursive. `Grammar` flattens every include chain once, at construction, into
the tuple of leaf rules the scanner tries at a position.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import re
from typing import Final, TypeAlias

from ycfpy.diagnostics.codes import (
    SCANNER_INVALID_ESCAPE,
    SCANNER_UNTERMINATED_ARRAY,
    SCANNER_UNTERMINATED_MAP,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from ycfpy.scanner.categories import SpanCategory


@dataclass(frozen=True, slots=True)
class Capture:
    """Child span carved out of a rule match.

    Either a named regex group of the rule's own pattern, or every match of a
    separate `pattern` inside the matched text.
    """

    category: SpanCategory
    group: str | None = None
    pattern: re.Pattern[str] | None = None

    def __post_init__(self):
        if (self.group is None) == (self.pattern is None):
            raise ValueError("Capture needs exactly one of `group` or `pattern`")


@dataclass(frozen=True, slots=True)
class MatchRule:
    name: str
    pattern: re.Pattern[str]
    category: SpanCategory
    captures: tuple[Capture, ...] = ()
    diagnostic: DiagnosticSpec | None = None


@dataclass(frozen=True, slots=True)
class RegionRule:
    name: str
    begin: re.Pattern[str]
    end: re.Pattern[str]
    category: SpanCategory
    begin_category: SpanCategory
    end_category: SpanCategory
    body: str
    # Unmatched body text belongs to the region itself (string content) rather
    # than being skipped as unrecognized.
    opaque: bool = False
    unterminated: DiagnosticSpec | None = None


@dataclass(frozen=True, slots=True)
class IncludeRule:
    name: str
    includes: tuple[str, ...]


Rule: TypeAlias = MatchRule | RegionRule | IncludeRule
LeafRule: TypeAlias = MatchRule | RegionRule


class Grammar:
    """Immutable, validated rule table."""

    def __init__(self, rules: Iterable[Rule], *, top_level: str) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            if rule.name in self._rules:
                raise ValueError(f"Duplicate rule name: {rule.name!r}")
            self._rules[rule.name] = rule

        self._top_level = top_level
        self._alternatives: dict[str, tuple[LeafRule, ...]] = {}
        for name in self._rules:
            self._alternatives[name] = self._flatten(name, ())

        self._require(top_level)
        for rule in self._rules.values():
            if isinstance(rule, RegionRule):
                self._require(rule.body)

    @property
    def top_level(self) -> str:
        return self._top_level

    def rule(self, name: str) -> Rule:
        self._require(name)
        return self._rules[name]

    def alternatives(self, name: str) -> tuple[LeafRule, ...]:
        """Leaf rules tried, in order, wherever rule `name` applies."""
        self._require(name)
        return self._alternatives[name]

    def _require(self, name: str) -> None:
        if name not in self._rules:
            raise ValueError(f"Unknown rule: {name!r}")

    def _flatten(self, name: str, visiting: tuple[str, ...]) -> tuple[LeafRule, ...]:
        if name in visiting:
            cycle = " -> ".join((*visiting, name))
            raise ValueError(f"Include cycle: {cycle}")
        self._require(name)
        rule = self._rules[name]
        match rule:
            case IncludeRule(includes=includes):
                leaves: list[LeafRule] = []
                for included in includes:
                    leaves.extend(self._flatten(included, (*visiting, name)))
                return tuple(leaves)
            case MatchRule() | RegionRule():
                return (rule,)


# Segment continuation admits a literal backslash; existing YCF files rely on it.
_IDENT_START: Final[str] = r"[A-Za-z_]"
_IDENT_CONTINUE: Final[str] = r"[A-Za-z0-9_\\-]"
_IDENT: Final[str] = rf"{_IDENT_START}{_IDENT_CONTINUE}*"


YCF_GRAMMAR: Final[Grammar] = Grammar(
    (
        IncludeRule("map_contents", ("separator_kv", "value", "map_key")),
        IncludeRule("value", ("keyword", "number", "string", "array", "map", "comment")),
        MatchRule("separator_kv", re.compile(r"="), SpanCategory.SEPARATOR_KV),
        MatchRule(
            "keyword",
            re.compile(rf"(?<!{_IDENT_CONTINUE})(?:true|false|null)(?!{_IDENT_CONTINUE})"),
            SpanCategory.KEYWORD,
        ),
        IncludeRule("number", ("number_hex", "number_bin", "number_oct", "number_dec")),
        MatchRule("number_hex", re.compile(r"0x[0-9A-Fa-f][0-9A-Fa-f_]*"), SpanCategory.NUMBER_HEX),
        MatchRule("number_bin", re.compile(r"0b[01][01_]*"), SpanCategory.NUMBER_BIN),
        MatchRule("number_oct", re.compile(r"0o[0-7][0-7_]*"), SpanCategory.NUMBER_OCT),
        MatchRule(
            "number_dec",
            re.compile(r"-?[0-9][0-9_]*(?:\.[0-9_]*)?(?:[eE][+-]?[0-9_]*)?"),
            SpanCategory.NUMBER_DEC,
        ),
        RegionRule(
            "string",
            begin=re.compile(r'"'),
            end=re.compile(r'"'),
            category=SpanCategory.STRING,
            begin_category=SpanCategory.STRING_BEGIN,
            end_category=SpanCategory.STRING_END,
            body="string_contents",
            opaque=True,
            unterminated=SCANNER_UNTERMINATED_STRING,
        ),
        IncludeRule("string_contents", ("escape", "invalid_escape")),
        MatchRule(
            "escape",
            re.compile(r'(?P<marker>\\)(?:[nrt0\\"]|x[0-9A-Fa-f]{2}|u\{[0-9A-Fa-f]{1,6}\})'),
            SpanCategory.ESCAPE,
            captures=(Capture(SpanCategory.ESCAPE_MARKER, group="marker"),),
        ),
        MatchRule(
            "invalid_escape",
            re.compile(r"\\.", re.DOTALL),
            SpanCategory.INVALID_ESCAPE,
            diagnostic=SCANNER_INVALID_ESCAPE,
        ),
        RegionRule(
            "array",
            begin=re.compile(r"\["),
            end=re.compile(r"\]"),
            category=SpanCategory.ARRAY,
            begin_category=SpanCategory.ARRAY_BEGIN,
            end_category=SpanCategory.ARRAY_END,
            body="value",
            unterminated=SCANNER_UNTERMINATED_ARRAY,
        ),
        RegionRule(
            "map",
            begin=re.compile(r"\{"),
            end=re.compile(r"\}"),
            category=SpanCategory.MAP,
            begin_category=SpanCategory.MAP_BEGIN,
            end_category=SpanCategory.MAP_END,
            body="map_contents",
            unterminated=SCANNER_UNTERMINATED_MAP,
        ),
        MatchRule(
            "map_key",
            re.compile(rf"{_IDENT}(?:\.{_IDENT})*"),
            SpanCategory.MAP_KEY,
            captures=(Capture(SpanCategory.SEPARATOR_PATH, pattern=re.compile(r"\.")),),
        ),
        MatchRule(
            "comment",
            re.compile(r"(?P<marker>//)[^\n]*\n?"),
            SpanCategory.COMMENT,
            captures=(Capture(SpanCategory.COMMENT_MARKER, group="marker"),),
        ),
    ),
    top_level="map_contents",
)
"""The YCF grammar: the document body is map contents without braces."""

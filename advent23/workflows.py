"""Part-sorting workflows: rating accepted parts and counting accepted combinations."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from math import prod

Ratings = tuple[int, int, int, int]
Span = tuple[int, int]
Ranges = tuple[Span, Span, Span, Span]

_CATEGORIES = "xmas"
_VALUE = re.compile(r"\+?[0-9]+")
_PART = re.compile(r"\{x=\+?([0-9]+),m=\+?([0-9]+),a=\+?([0-9]+),s=\+?([0-9]+)\}")
_FULL_RANGES: Ranges = ((1, 4000), (1, 4000), (1, 4000), (1, 4000))


class TargetKind(Enum):
    ACCEPT = "accept"
    REJECT = "reject"
    LABEL = "label"


@dataclass(frozen=True)
class Target:
    """Where a part goes next: accepted, rejected, or another workflow."""

    kind: TargetKind
    name: str = ""

    @classmethod
    def parse(cls, text: str) -> Target:
        """Text starting with ``A`` accepts, with ``R`` rejects; anything else names a workflow."""
        if not text:
            raise ValueError("empty target")
        if text[0] == "A":
            return ACCEPT
        if text[0] == "R":
            return REJECT
        return cls(TargetKind.LABEL, text)


ACCEPT = Target(TargetKind.ACCEPT)
REJECT = Target(TargetKind.REJECT)


def _with(ranges: Ranges, category: int, span: Span) -> Ranges:
    updated = list(ranges)
    updated[category] = span
    return tuple(updated)  # type: ignore[return-value]


@dataclass(frozen=True)
class Rule:
    """A comparison on one category that sends matching parts to ``target``.

    A rule without a category always matches.
    """

    target: Target
    category: int | None = None
    operator: str = ""
    value: int = 0

    @classmethod
    def parse(cls, text: str) -> Rule:
        """Parse ``a<2006:qkq`` or a bare target such as ``rfg``."""
        condition, sep, target = text.partition(":")
        if not sep:
            return cls(Target.parse(text))
        if len(condition) < 2 or condition[0] not in _CATEGORIES:
            raise ValueError(f"invalid condition {condition!r}")
        operator = condition[1]
        value_text = condition[2:]
        if not _VALUE.fullmatch(value_text):
            raise ValueError(f"invalid value {value_text!r}")
        parsed_target = Target.parse(target)
        if operator not in "<>" or len(operator) != 1:
            raise ValueError(f"invalid operator {operator!r}")
        return cls(parsed_target, _CATEGORIES.index(condition[0]), operator, int(value_text))

    def evaluate(self, ratings: Ratings) -> Target | None:
        """The target if the part matches this rule, else None."""
        if self.category is None:
            return self.target
        rating = ratings[self.category]
        if self.operator == ">" and rating > self.value:
            return self.target
        if self.operator == "<" and rating < self.value:
            return self.target
        return None

    def explore(
        self, source: Target, index: int, ranges: Ranges
    ) -> list[tuple[Target, int, Ranges]]:
        """Split ``ranges`` between this rule's target and the next rule of ``source``."""
        if self.category is None:
            return [(self.target, 0, ranges)]
        category, value = self.category, self.value
        lo, hi = ranges[category]
        if self.operator == "<":
            if lo >= value:
                return [(source, index + 1, ranges)]
            if hi < value:
                return [(self.target, 0, ranges)]
            return [
                (self.target, 0, _with(ranges, category, (lo, value - 1))),
                (source, index + 1, _with(ranges, category, (value, hi))),
            ]
        if hi <= value:
            return [(source, index + 1, ranges)]
        if lo > value:
            return [(self.target, 0, ranges)]
        return [
            (source, index + 1, _with(ranges, category, (lo, value))),
            (self.target, 0, _with(ranges, category, (value + 1, hi))),
        ]


@dataclass(frozen=True)
class Workflow:
    """A named, ordered list of rules."""

    name: str
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, line: str) -> Workflow:
        """Parse ``px{a<2006:qkq,m>2090:A,rfg}``; rules that do not parse are left out."""
        if not line:
            raise ValueError("empty workflow")
        name, sep, body = line[:-1].partition("{")
        if not sep:
            raise ValueError(f"malformed workflow {line!r}")
        rules = []
        for text in body.split(","):
            try:
                rules.append(Rule.parse(text))
            except ValueError:
                continue
        return cls(name, tuple(rules))

    def evaluate(self, ratings: Ratings) -> Target | None:
        """Target of the first matching rule, or None if none matches."""
        for rule in self.rules:
            target = rule.evaluate(ratings)
            if target is not None:
                return target
        return None

    def explore(self, index: int, ranges: Ranges) -> list[tuple[Target, int, Ranges]]:
        """Apply rule ``index`` to ``ranges``; nothing comes out past the last rule."""
        if index >= len(self.rules):
            return []
        return self.rules[index].explore(Target(TargetKind.LABEL, self.name), index, ranges)


def parse_part(line: str) -> Ratings:
    """Parse ``{x=787,m=2655,a=1222,s=2876}`` into its four ratings."""
    match = _PART.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed part {line!r}")
    x, m, a, s = (int(group) for group in match.groups())
    return x, m, a, s


def parse_system(text: str) -> tuple[dict[str, Workflow], list[Ratings]]:
    """Workflows by name and the list of parts; malformed lines are skipped."""
    flows_text, sep, parts_text = text.partition("\n\n")
    if not sep:
        raise ValueError("missing blank line between workflows and parts")
    flows: dict[str, Workflow] = {}
    for line in flows_text.splitlines():
        try:
            flow = Workflow.parse(line)
        except ValueError:
            continue
        flows[flow.name] = flow
    parts = []
    for line in parts_text.splitlines():
        try:
            parts.append(parse_part(line))
        except ValueError:
            continue
    return flows, parts


def total_accepted_rating(parts: list[Ratings], flows: dict[str, Workflow]) -> int:
    """Sum of all ratings of the parts that end up accepted."""
    total = 0
    for part in parts:
        flow = flows["in"]
        while (target := flow.evaluate(part)) is not None:
            if target.kind is TargetKind.ACCEPT:
                total += sum(part)
                break
            if target.kind is TargetKind.REJECT:
                break
            flow = flows[target.name]
    return total


def count_accepted_combinations(flows: dict[str, Workflow]) -> int:
    """Number of rating combinations in 1..4000 that the workflows accept."""
    total = 0
    queue: deque[tuple[Target, int, Ranges]] = deque(
        [(Target(TargetKind.LABEL, "in"), 0, _FULL_RANGES)]
    )
    while queue:
        target, index, ranges = queue.popleft()
        if target.kind is TargetKind.ACCEPT:
            total += prod(hi - lo + 1 for lo, hi in ranges)
        elif target.kind is TargetKind.LABEL:
            queue.extend(flows[target.name].explore(index, ranges))
    return total


def part1(text: str) -> int:
    """Total rating of the accepted parts."""
    flows, parts = parse_system(text)
    return total_accepted_rating(parts, flows)


def part2(text: str) -> int:
    """Count of distinct accepted rating combinations."""
    flows, _ = parse_system(text)
    return count_accepted_combinations(flows)
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Protocol

MANUAL_BLOCK_REASON = "Manually blocked"
AUTO_BLOCK_REASON = "Automatically blocked"


class WeeklyRule(Protocol):
    id: str
    court_index: int
    weekday: int
    from_time: str
    to_time: str
    reason: str | None


@dataclass(frozen=True)
class ManualSlot:
    court_index: int
    date_key: date
    time: str


def weekday_of(d: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return (d.weekday() + 1) % 7


def rule_contains(rule: WeeklyRule, court_index: int, weekday: int, time: str) -> bool:
    if rule.court_index != court_index or rule.weekday != weekday:
        return False
    return rule.from_time <= time < rule.to_time


class BlockRuleIndex:
    """Weekly recurring rules plus single-date manual blocks.

    Weekly rules are matched first-match-wins in the order they were given.
    Admin mutations go through this object so the next availability query sees
    them.
    """

    def __init__(self, weekly_rules: Iterable[WeeklyRule] = (), manual_blocks: Iterable[ManualSlot] = ()):
        self._rules: list[WeeklyRule] = list(weekly_rules)
        self._manual: set[ManualSlot] = set(manual_blocks)

    @property
    def rules(self) -> list[WeeklyRule]:
        return list(self._rules)

    @property
    def manual_blocks(self) -> set[ManualSlot]:
        return set(self._manual)

    def weekly_rule_for(self, court_index: int, weekday: int, time: str) -> WeeklyRule | None:
        for rule in self._rules:
            if rule_contains(rule, court_index, weekday, time):
                return rule
        return None

    def is_weekly_blocked(self, court_index: int, d: date, time: str) -> bool:
        return self.weekly_rule_for(court_index, weekday_of(d), time) is not None

    def is_manually_blocked(self, court_index: int, d: date, time: str) -> bool:
        return ManualSlot(court_index, d, time) in self._manual

    def is_blocked(self, court_index: int, d: date, time: str) -> bool:
        return self.is_manually_blocked(court_index, d, time) or self.is_weekly_blocked(court_index, d, time)

    def block_reason(self, court_index: int, d: date, time: str) -> str | None:
        rule = self.weekly_rule_for(court_index, weekday_of(d), time)
        if rule is not None and rule.reason:
            return rule.reason
        if self.is_manually_blocked(court_index, d, time):
            return MANUAL_BLOCK_REASON
        if rule is not None:
            return AUTO_BLOCK_REASON
        return None

    def find_overlapping_rule(self, court_index: int, weekday: int, from_time: str, to_time: str) -> WeeklyRule | None:
        for rule in self._rules:
            if rule.court_index != court_index or rule.weekday != weekday:
                continue
            if rule.from_time < to_time and from_time < rule.to_time:
                return rule
        return None

    def add_rule(self, rule: WeeklyRule) -> None:
        self._rules.append(rule)

    def remove_rule(self, rule_id: str) -> bool:
        for i, rule in enumerate(self._rules):
            if rule.id == rule_id:
                del self._rules[i]
                return True
        return False

    def toggle_manual(self, court_index: int, d: date, time: str) -> bool:
        """Flip the manual block on a slot; returns whether it is now blocked."""
        slot = ManualSlot(court_index, d, time)
        if slot in self._manual:
            self._manual.discard(slot)
            return False
        self._manual.add(slot)
        return True

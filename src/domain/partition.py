"""Split one game's outcomes into independently ranked gender groups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from domain.common import Gender
from domain.values import ParsedOutcome


@dataclass(frozen=True)
class GenderOutcomes:
    female: list[ParsedOutcome] = field(default_factory=list)
    male: list[ParsedOutcome] = field(default_factory=list)

    def groups(self) -> tuple[tuple[Gender, list[ParsedOutcome]], ...]:
        return ((Gender.FEMALE, self.female), (Gender.MALE, self.male))


def partition_by_gender(outcomes: Iterable[ParsedOutcome]) -> GenderOutcomes:
    """Partition outcomes by the gender of their team, keeping input order per group."""
    partitioned = GenderOutcomes()
    for outcome in outcomes:
        if outcome.team.gender is Gender.FEMALE:
            partitioned.female.append(outcome)
        elif outcome.team.gender is Gender.MALE:
            partitioned.male.append(outcome)
        else:
            raise ValueError(f"team_id={outcome.team.id} has unknown gender {outcome.team.gender!r}")
    return partitioned


__all__ = ["GenderOutcomes", "partition_by_gender"]

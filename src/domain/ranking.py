"""Competition ranking of one game's outcomes within one gender group."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from domain.values import ParsedOutcome, ScoredOutcome

MAX_POINTS = 50


def evaluate(outcomes: Sequence[ParsedOutcome], *, max_points: int = MAX_POINTS) -> list[ScoredOutcome]:
    """Assign point values by standard competition ranking ("1224").

    The best value receives `max_points`. Tied values share a point value and
    the next distinct value drops by the size of the tie run. Times rank
    ascending, points rank descending. Each returned outcome carries its
    `point_value` and a team snapshot whose `points` include it.

    `current_points` is not floored: a group larger than `max_points` yields
    zero or negative point values at the tail.
    """
    if not outcomes:
        return []

    value_type = type(outcomes[0].value)
    mixed = [outcome for outcome in outcomes if type(outcome.value) is not value_type]
    if mixed:
        raise ValueError(
            f"Cannot rank {value_type.kind.value} results together with "
            f"{mixed[0].value.kind.value} results (game_id={mixed[0].game_id})"
        )

    ranked = sorted(
        outcomes,
        key=lambda outcome: outcome.value.rank_key(),
        reverse=value_type.ranks_descending,
    )

    scored: list[ScoredOutcome] = []
    current_points = max_points
    current_gap = 1
    for index, outcome in enumerate(ranked):
        scored.append(
            ScoredOutcome(
                game_id=outcome.game_id,
                team=replace(outcome.team, points=outcome.team.points + current_points),
                value=outcome.value,
                point_value=current_points,
            )
        )

        if index + 1 < len(ranked) and outcome.value != ranked[index + 1].value:
            current_points -= current_gap
            current_gap = 1
        else:
            current_gap += 1

    return scored


__all__ = ["MAX_POINTS", "evaluate"]

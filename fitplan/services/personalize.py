from __future__ import annotations

import logging
from typing import List, Sequence

from fitplan.config import get_settings
from fitplan.models.workout import Equipment, WorkoutRecommendation, WorkoutType
from .catalog import filter_by_duration, filter_by_equipment

logger = logging.getLogger(__name__)


def personalize(
    candidates: Sequence[WorkoutRecommendation],
    preferred_types: Sequence[WorkoutType],
    available_equipment: Sequence[Equipment],
    available_time: int,
    top_n: int | None = None,
) -> List[WorkoutRecommendation]:
    """Filter, rank and flag candidates for one user.
    Rules, in order:
    - Drop candidates sharing no equipment with what is available.
    - Drop candidates longer than the available time.
    - Preferred workout types first; otherwise the incoming order is kept.
    - The first top_n entries are flagged as recommended.
    """
    if top_n is None:
        top_n = get_settings().MAX_TOP_RECOMMENDATIONS

    out = filter_by_equipment(candidates, available_equipment)
    out = filter_by_duration(out, available_time)

    preferred = set(preferred_types)

    def score(w: WorkoutRecommendation) -> int:
        return 1 if w.workout_type in preferred else 0

    # list.sort is stable, also with reverse=True
    out.sort(key=score, reverse=True)

    top = min(max(top_n, 0), len(out))
    out[:top] = [w.model_copy(update={"is_recommended": True}) for w in out[:top]]

    logger.debug(
        "personalized %d of %d candidates, top=%s",
        len(out),
        len(candidates),
        [w.id for w in out[:top]],
    )
    return out

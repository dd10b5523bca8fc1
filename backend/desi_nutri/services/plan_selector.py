"""
Plan Selector
-------------
Chooses the exercises for a daily workout plan.
1. Maps the user's fitness goal to a per-category quota.
2. Seeds the plan with yesterday's missed exercises.
3. Fills the remaining slots at random, honoring the quota first.
"""

import logging
import random
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from desi_nutri.services.exercise_library import (
    CARDIO, CATEGORIES, EXERCISE_LIBRARY, FLEXIBILITY, STRENGTH,
    ExerciseDefinition, get_exercise, get_exercises_by_category,
)

logger = logging.getLogger(__name__)

PLAN_SIZE = 5


class CategoryQuota(NamedTuple):
    cardio: int
    strength: int
    flexibility: int

    def as_dict(self) -> Dict[str, int]:
        return {CARDIO: self.cardio, STRENGTH: self.strength, FLEXIBILITY: self.flexibility}


DEFAULT_QUOTA = CategoryQuota(2, 2, 1)

# Checked in order, first hit wins. Goals arrive as free text from the profile
# screen in either language, or as snake_case keys from older clients.
GOAL_QUOTAS = (
    (("weight loss", "weight_loss", "lose weight", "fat loss", "fat_loss", "ওজন কম"), CategoryQuota(3, 1, 1)),
    (("muscle", "মাংসপেশী"), CategoryQuota(1, 3, 1)),
    (("flexibility", "নমনীয়"), CategoryQuota(1, 1, 3)),
)

GoalQuotaStrategy = Callable[[Optional[str]], CategoryQuota]


def goal_to_quota(fitness_goal: Optional[str]) -> CategoryQuota:
    goal = (fitness_goal or "").lower()
    for keywords, quota in GOAL_QUOTAS:
        if any(keyword in goal for keyword in keywords):
            return quota
    return DEFAULT_QUOTA


def select_exercises(
    fitness_goal: Optional[str],
    missed_ids: Sequence[str] = (),
    library: Sequence[ExerciseDefinition] = EXERCISE_LIBRARY,
    rng: Optional[random.Random] = None,
    quota_strategy: GoalQuotaStrategy = goal_to_quota,
) -> List[ExerciseDefinition]:
    """
    Pick up to PLAN_SIZE exercises for one day.

    Missed exercises come first, in the order given. Never raises when the
    library runs dry; the plan is just shorter.
    """
    rng = rng or random.Random()
    quota = quota_strategy(fitness_goal).as_dict()

    selected: List[ExerciseDefinition] = []
    used_ids = set()

    for missed_id in missed_ids or ():
        if len(selected) >= PLAN_SIZE:
            break
        exercise = get_exercise(missed_id, library)
        if exercise and exercise.id not in used_ids:
            selected.append(exercise)
            used_ids.add(exercise.id)

    pools = {}
    for category in CATEGORIES:
        pool = [e for e in get_exercises_by_category(category, library) if e.id not in used_ids]
        rng.shuffle(pool)
        pools[category] = pool

    while len(selected) < PLAN_SIZE:
        pick = None
        for category, wanted in quota.items():
            have = sum(1 for e in selected if e.category == category)
            if have < wanted and pools[category]:
                pick = pools[category].pop()
                break

        if pick is None:
            # Quota met or its pools are empty: take anything left
            leftovers = [e for category in CATEGORIES for e in pools[category]]
            if not leftovers:
                logger.info(f"Exercise library exhausted after {len(selected)} picks")
                break
            pick = rng.choice(leftovers)
            pools[pick.category].remove(pick)

        selected.append(pick)
        used_ids.add(pick.id)

    return selected[:PLAN_SIZE]

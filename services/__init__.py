"""
Services Package

Business logic modules for the meal planner.
"""

from .planner import (
    WeeklyPlanEntry,
    generate_weekly_plan,
    partition_by_time_slot,
)

from .shopping import (
    build_shopping_list,
    split_ingredients,
)

from .identity import (
    Identity,
    IdentityError,
    authenticate,
    create_user,
)

from .meal_store import (
    InvalidMealError,
    MealStoreError,
    add_meal,
    meals_for,
)

__all__ = [
    # Planning
    'WeeklyPlanEntry',
    'generate_weekly_plan',
    'partition_by_time_slot',
    # Shopping
    'build_shopping_list',
    'split_ingredients',
    # Identity
    'Identity',
    'IdentityError',
    'authenticate',
    'create_user',
    # Meal store
    'InvalidMealError',
    'MealStoreError',
    'add_meal',
    'meals_for',
]

"""
Meal Store Service

Append-only storage of meals, always scoped to the identity asking.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from constants import MAX_LENGTHS, VALID_TIME_SLOTS
from models import db, Meal
from utils.sanitizer import sanitize_meal_name, sanitize_ingredients

logger = logging.getLogger(__name__)


class MealStoreError(Exception):
    """Raised when the underlying database fails."""
    pass


class InvalidMealError(ValueError):
    """Raised when a new meal fails validation."""
    pass


def add_meal(identity, name, ingredients, time_slot):
    """
    Store a new meal owned by ``identity``.

    Raises InvalidMealError for an empty name or an unknown time slot and
    MealStoreError when the write fails.
    """
    name = sanitize_meal_name(name, max_length=MAX_LENGTHS['meal_name'])
    if not name:
        raise InvalidMealError('Meal name is required.')
    time_slot = (time_slot or '').strip()
    if time_slot not in VALID_TIME_SLOTS:
        raise InvalidMealError('Time must be one of Breakfast, Lunch or Dinner.')

    meal = Meal(
        name=name,
        ingredients=sanitize_ingredients(ingredients, max_length=MAX_LENGTHS['ingredients']),
        time_slot=time_slot,
        user_id=identity.uid,
    )
    db.session.add(meal)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise MealStoreError('Could not save meal') from e

    logger.info('User %s added %s meal %s', identity.uid, time_slot, meal.id)
    return meal


def meals_for(identity, newest_first=False):
    """Return every meal owned by ``identity``."""
    query = Meal.query.filter_by(user_id=identity.uid)
    if newest_first:
        query = query.order_by(Meal.created_at.desc(), Meal.id.desc())
    try:
        return query.all()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise MealStoreError('Could not load meals') from e

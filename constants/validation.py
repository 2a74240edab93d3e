"""
Validation Constants

Contains whitelist values for validating user input and the fixed
calendar used by the weekly planner.
"""

# Time slots a meal can be tagged with, in display order
TIME_SLOTS = ('Breakfast', 'Lunch', 'Dinner')

# Valid values for the meal time slot field (whitelist for security)
VALID_TIME_SLOTS = frozenset(TIME_SLOTS)

# Days covered by a weekly plan, in plan order
DAYS_OF_WEEK = (
    'Monday', 'Tuesday', 'Wednesday', 'Thursday',
    'Friday', 'Saturday', 'Sunday',
)

# Maximum field lengths for security
MAX_LENGTHS = {
    'meal_name': 200,
    'ingredients': 2000,
    'email': 254,
}

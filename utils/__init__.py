# Utility modules for the meal planner
from .sanitizer import sanitize_text, sanitize_meal_name, sanitize_ingredients
from .auth import login_required, login_user, logout_user, current_identity

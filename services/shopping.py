"""
Shopping List Service

Consolidates the ingredients of every meal in a weekly plan.
"""


def split_ingredients(text):
    """Split comma-delimited ingredient text into trimmed tokens."""
    if not text:
        return []
    return [token.strip() for token in text.split(',')]


def build_shopping_list(plan, skip_empty=False):
    """
    Build a shopping list from a weekly plan.

    Tokens are deduplicated case-sensitively after trimming and returned in
    first-occurrence order. Empty tokens (from a trailing comma, say) are
    kept unless skip_empty is set.
    """
    all_ingredients = []
    for entry in plan:
        for _slot, meal in entry.meals():
            all_ingredients.extend(split_ingredients(meal.ingredients))

    if skip_empty:
        all_ingredients = [token for token in all_ingredients if token]

    return list(dict.fromkeys(all_ingredients))

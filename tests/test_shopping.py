from models import Meal
from services.planner import WeeklyPlanEntry, generate_weekly_plan
from services.shopping import build_shopping_list, split_ingredients


def make_meal(name, time_slot, ingredients):
    return Meal(name=name, time_slot=time_slot, ingredients=ingredients)


def test_empty_plan_gives_empty_list():
    assert build_shopping_list(generate_weekly_plan([])) == []


def test_duplicates_collapse_after_trimming():
    plan = [
        WeeklyPlanEntry(
            day='Monday',
            breakfast=make_meal('Omelette', 'Breakfast', 'eggs, milk'),
            lunch=make_meal('Sandwich', 'Lunch', ' eggs ,bread'),
        )
    ]
    items = build_shopping_list(plan)
    assert items.count('eggs') == 1
    assert set(items) == {'eggs', 'milk', 'bread'}


def test_first_occurrence_order():
    plan = [
        WeeklyPlanEntry(day='Monday', dinner=make_meal('Curry', 'Dinner', 'rice, chicken')),
        WeeklyPlanEntry(day='Tuesday', dinner=make_meal('Bowl', 'Dinner', 'beans, rice')),
    ]
    assert build_shopping_list(plan) == ['rice', 'chicken', 'beans']


def test_case_sensitive():
    plan = [WeeklyPlanEntry(day='Monday', lunch=make_meal('Salad', 'Lunch', 'Tomato, tomato'))]
    assert build_shopping_list(plan) == ['Tomato', 'tomato']


def test_oats_scenario():
    oats = make_meal('Oats', 'Breakfast', 'oats, milk')
    assert set(build_shopping_list(generate_weekly_plan([oats]))) == {'oats', 'milk'}


def test_meal_without_ingredients_contributes_nothing():
    plan = [
        WeeklyPlanEntry(
            day='Monday',
            breakfast=make_meal('Coffee', 'Breakfast', None),
            lunch=make_meal('Water', 'Lunch', ''),
            dinner=make_meal('Soup', 'Dinner', 'leeks'),
        )
    ]
    assert build_shopping_list(plan) == ['leeks']


def test_empty_tokens_kept_by_default():
    plan = [WeeklyPlanEntry(day='Monday', dinner=make_meal('Pasta', 'Dinner', 'pasta, , sauce,'))]
    assert build_shopping_list(plan) == ['pasta', '', 'sauce']


def test_empty_tokens_dropped_when_requested():
    plan = [WeeklyPlanEntry(day='Monday', dinner=make_meal('Pasta', 'Dinner', 'pasta, , sauce,'))]
    assert build_shopping_list(plan, skip_empty=True) == ['pasta', 'sauce']


def test_split_ingredients():
    assert split_ingredients(' a ,b,  c ') == ['a', 'b', 'c']
    assert split_ingredients('') == []
    assert split_ingredients(None) == []

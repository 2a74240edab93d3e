"""
Smoke tests for the meal planner.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('FLASK_ENV', 'testing')

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, db
    assert app is not None
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from app import User, Meal
    assert User is not None
    assert Meal is not None
    print("OK: Models import successfully")

def test_utils_import():
    """Verify auth and sanitizer utilities can be imported."""
    from utils import login_required, sanitize_meal_name, sanitize_ingredients
    assert callable(login_required)
    assert callable(sanitize_meal_name)
    assert callable(sanitize_ingredients)
    print("OK: Utils import successfully")

def test_constants_unchanged():
    """Verify the planner calendar and slots have expected values."""
    from constants import TIME_SLOTS, DAYS_OF_WEEK

    # These values must not change
    assert TIME_SLOTS == ('Breakfast', 'Lunch', 'Dinner')
    assert DAYS_OF_WEEK[0] == 'Monday'
    assert DAYS_OF_WEEK[-1] == 'Sunday'
    assert len(DAYS_OF_WEEK) == 7
    print("OK: Constants unchanged")

def test_app_runs():
    """Verify app can create test client and guards the home page."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        response = client.get('/login')
        assert response.status_code == 200
        response = client.get('/')
        assert response.status_code == 302
        print("OK: App serves login page and protects home page")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_utils_import,
        test_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)

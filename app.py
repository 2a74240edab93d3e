import logging

from flask import Flask, render_template, request, redirect, url_for
from flask_migrate import Migrate

from config import get_config
from constants import TIME_SLOTS
from models import db, User, Meal
from services import (
    generate_weekly_plan, build_shopping_list,
    create_user, authenticate, IdentityError,
    add_meal, meals_for, InvalidMealError, MealStoreError,
)
from utils.auth import login_required, login_user, logout_user, current_identity

app = Flask(__name__)
app.config.from_object(get_config())

db.init_app(app)
migrate = Migrate(app, db)

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
app.logger.setLevel(app.config['LOG_LEVEL'])


@app.context_processor
def inject_current_user():
    return {'current_user': current_identity()}

# ============================================
# ROUTES - AUTH
# ============================================

@app.route('/signup', methods=['GET', 'POST'])
def signup():
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        try:
            create_user(email, password, min_password_length=app.config['MIN_PASSWORD_LENGTH'])
        except IdentityError as e:
            return render_template('signup.html', error=str(e), email=email)
        return redirect(url_for('login'))

    return render_template('signup.html', error=None)

@app.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        try:
            identity = authenticate(email, password)
        except IdentityError as e:
            return render_template('login.html', error=str(e), email=email)
        login_user(identity)
        app.logger.info('User %s logged in', identity.uid)
        return redirect(url_for('index'))

    return render_template('login.html', error=None)

@app.route('/logout')
def logout():
    logout_user()
    return redirect(url_for('login'))

# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
@login_required
def index(identity):
    return render_template('home.html', user=identity)

# ============================================
# ROUTES - MEALS
# ============================================

@app.route('/add-meal', methods=['GET', 'POST'])
@login_required
def add_meal_view(identity):
    if request.method == 'POST':
        try:
            add_meal(
                identity,
                name=request.form.get('mealName', ''),
                ingredients=request.form.get('ingredients', ''),
                time_slot=request.form.get('time', ''),
            )
        except InvalidMealError as e:
            return render_template('add_meal.html', success=None, error=str(e),
                                   time_slots=TIME_SLOTS), 400
        except MealStoreError:
            app.logger.exception('Error saving meal for user %s', identity.uid)
            return 'Error saving meal.', 500
        return render_template('add_meal.html', success='Meal added successfully!',
                               error=None, time_slots=TIME_SLOTS)

    return render_template('add_meal.html', success=None, error=None, time_slots=TIME_SLOTS)

@app.route('/meals')
@login_required
def meals_list(identity):
    try:
        meals = meals_for(identity, newest_first=True)
    except MealStoreError:
        app.logger.exception('Error fetching meals for user %s', identity.uid)
        return 'Error loading meals.', 500
    return render_template('meals.html', meals=meals)

# ============================================
# ROUTES - WEEKLY PLAN
# ============================================

@app.route('/weekly-plan')
@login_required
def weekly_plan(identity):
    try:
        meals = meals_for(identity)
    except MealStoreError:
        app.logger.exception('Error generating weekly plan for user %s', identity.uid)
        return 'Error generating weekly plan.', 500

    week_plan = generate_weekly_plan(meals)
    return render_template('weekly_plan.html', week_plan=week_plan, time_slots=TIME_SLOTS)

@app.route('/shopping-list')
@login_required
def shopping_list(identity):
    try:
        meals = meals_for(identity)
    except MealStoreError:
        app.logger.exception('Error generating shopping list for user %s', identity.uid)
        return 'Error generating shopping list.', 500

    # Each view draws its own plan; nothing is persisted between requests
    week_plan = generate_weekly_plan(meals)
    unique_ingredients = build_shopping_list(
        week_plan, skip_empty=app.config['SHOPPING_LIST_SKIP_EMPTY']
    )
    return render_template('shopping_list.html', unique_ingredients=unique_ingredients)

# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)

from utils.sanitizer import sanitize_ingredients, sanitize_meal_name, sanitize_text


def test_sanitize_text_strips_control_characters():
    assert sanitize_text('  eggs\x00\x07 ') == 'eggs'
    assert sanitize_text(None) == ''


def test_meal_name_truncated():
    name = sanitize_meal_name('x' * 300, max_length=20)
    assert len(name) == 20
    assert name.endswith('...')


def test_meal_name_keeps_markup_for_template_escaping():
    assert sanitize_meal_name('Mac & <b>cheese</b>') == 'Mac & <b>cheese</b>'


def test_ingredients_keep_commas_and_spacing():
    assert sanitize_ingredients('eggs ,  milk,\nbread') == 'eggs ,  milk, bread'
    assert sanitize_ingredients(None) == ''

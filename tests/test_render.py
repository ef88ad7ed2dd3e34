from choices import Choices
from menu_render import MenuStyle, help_text, lines_to_clear, render_header, render_menu

FRUITS = Choices([('Apple', 1), ('Banana', 2), ('Cherry', 3)])


def tag(text, color):
    return f'<{color}>{text}</{color}>'


def test_help_text_default_and_enumerated():
    assert help_text(MenuStyle(), 3) == '(Use arrow keys, press Enter to select)'
    assert help_text(MenuStyle(enum=')'), 3) == '(Use arrow or number (1-3) keys, press Enter to select)'
    assert help_text(MenuStyle(enum=')', help='Pick one'), 3) == 'Pick one'


def test_header_shows_help_only_on_first_render():
    style = MenuStyle(prefix='? ', help_color='dim')
    first = render_header('Fruit?', FRUITS, 1, False, True, style, tag)
    later = render_header('Fruit?', FRUITS, 1, False, False, style, tag)

    assert first == '? Fruit? <dim>(Use arrow keys, press Enter to select)</dim>'
    assert later == '? Fruit? '


def test_header_shows_answer_when_done():
    style = MenuStyle(prefix='? ', active_color='green')
    assert render_header('Fruit?', FRUITS, 2, True, False, style, tag) == '? Fruit? <green>Banana</green>'


def test_menu_marks_active_row():
    style = MenuStyle(marker='>', active_color='green')
    assert render_menu(FRUITS, 2, style, tag) == '  Apple\n<green>> Banana</green>\n  Cherry'


def test_menu_enumerated():
    style = MenuStyle(marker='>', enum='.')
    assert render_menu(FRUITS, 1, style) == '> 1. Apple\n  2. Banana\n  3. Cherry'


def test_lines_to_clear_counts_question_lines():
    assert lines_to_clear('Fruit?', FRUITS) == 4
    assert lines_to_clear('Pick\na\nfruit?', FRUITS) == 6

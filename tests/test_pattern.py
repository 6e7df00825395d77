import pytest

from pascal_snake.pattern import count_pascals, evaluate_bonus, snake_word

from conftest import make_state


@pytest.mark.parametrize("text,expected", [
    ("Pascal", 1),
    ("Pascal_pascal", 2),
    ("Pascal_pascal_pascal", 3),
    ("Pasca", 0),
    ("Xascal", 0),
    ("PASCAL_PASCAL", 2),
    ("", 0),
    ("Pascal_pasca", 1),
    ("Pascal_Pascal_pascalxyz", 3),
    ("Pascalpascal", 1),
    ("Pascal_pascXl_pascal", 1),
])
def test_count_pascals(text, expected):
    assert count_pascals(text) == expected


def word_state(word, repeat_count=0):
    cells = [(i, 0) for i in range(len(word))]
    state = make_state(cells, letters=word)
    state.repeat_count = repeat_count
    return state


def test_snake_word_is_head_first():
    state = word_state("Pasc")
    assert snake_word(state.snake) == "Pasc"


def test_first_word_gives_small_bonus():
    state = word_state("Pascal")
    event = evaluate_bonus(state)
    assert event is not None
    assert event.kind == "small"
    assert event.points == 500
    assert event.text == "Pascal!"
    assert state.score == 500
    assert state.repeat_count == 1


def test_bonus_only_fires_once_per_count():
    state = word_state("Pascal")
    evaluate_bonus(state)
    assert evaluate_bonus(state) is None
    assert state.score == 500


def test_further_words_give_large_bonus():
    state = word_state("Pascal_pascal", repeat_count=1)
    event = evaluate_bonus(state)
    assert event.kind == "large"
    assert event.points == 1000
    assert state.score == 1000
    assert state.repeat_count == 2


def test_partial_word_gives_nothing():
    state = word_state("Pasca")
    assert evaluate_bonus(state) is None
    assert state.score == 0
    assert state.repeat_count == 0


def test_repeat_count_never_decreases():
    state = word_state("Xascal", repeat_count=2)
    assert evaluate_bonus(state) is None
    assert state.repeat_count == 2

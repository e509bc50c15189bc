"""Tests for the justification engine."""

import pytest

from justify import transform
from justify.engine import iter_lines, justify_lines, validate_line_width
from justify.errors import InvalidLineWidthError, JustifyError


SPLIT_CASES = [
    ("consectetur", 4, "cons\necte\ntur "),
    ("Привет", 12, "Привет      "),
    (
        "Поддержка кодировки utf-8 в коде",
        8,
        "Поддержк\nа       \nкодировк\nи       \nutf-8  в\nкоде    ",
    ),
    (
        "Съешь ещё этих мягких французских булок, да выпей чаю",
        12,
        "Съешь    ещё\nэтих  мягких\nфранцузских \nбулок,    да\nвыпей    чаю",
    ),
    (
        "🤩 привет  💨 hello",
        1,
        "🤩\nп\nр\nи\nв\nе\nт\n💨\nh\ne\nl\nl\no",
    ),
    ("🤩 привет  💨 hello", 3, "🤩  \nпри\nвет\n💨  \nhel\nlo "),
]

TONGUE_TWISTER = (
    "Вез корабль карамель, наскочил корабль на мель, "
    "матросы две недели карамель на мели ели."
)

EQUAL_LENGTH_CASES = [
    ("Бык тупогуб, тупогубенький бычок, у быка губа тупа.", 5),
    (TONGUE_TWISTER, 18),
    (TONGUE_TWISTER, 6),
    (TONGUE_TWISTER, 1),
    ("Тpидцaть тpи коpaбля лaвиpовaли, лaвиpовaли, лавировали, дa не \tвылaвиpовaли.", 4),
    ("У переп\tелa и перепелки\t\t\t пять  \t\tперепелят    .", 3),
    ("a b c d e f g h i j k l m n o p", 8),
    ("lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod", 25),
]


class TestTransform:
    """Tests for transform()."""

    @pytest.mark.parametrize("text,line_width,expected", SPLIT_CASES)
    def test_reference_output(self, text, line_width, expected):
        assert transform(text, line_width) == expected

    @pytest.mark.parametrize("text,line_width", EQUAL_LENGTH_CASES)
    def test_every_line_has_line_width(self, text, line_width):
        result = transform(text, line_width)
        assert result
        for line in result.split("\n"):
            assert len(line) == line_width

    @pytest.mark.parametrize("line_width", [0, 1, 5, 80])
    def test_empty_input(self, line_width):
        assert transform("", line_width) == ""

    def test_whitespace_only_input(self):
        assert transform(" \t\n  ", 10) == ""

    def test_no_trailing_newline(self):
        assert not transform("lorem ipsum dolor", 6).endswith("\n")

    def test_single_line_fit(self):
        assert transform("ab cd ef", 10) == "ab  cd  ef"

    def test_two_words_single_gap_takes_surplus(self):
        assert transform("ab cd", 9) == "ab" + " " * 5 + "cd"

    def test_uneven_gap_division_keeps_width(self):
        assert transform("a b c d", 8) == "a b c  d"

    @pytest.mark.parametrize("text,line_width", EQUAL_LENGTH_CASES)
    def test_words_are_preserved(self, text, line_width):
        result = transform(text, line_width)
        assert "".join(result.split()) == "".join(text.split())

    def test_oversized_word_between_short_words(self):
        result = transform("ab abcdefgh cd", 4)
        assert result.split("\n") == ["ab  ", "abcd", "efgh", "cd  "]

    def test_input_newlines_are_reflowed(self):
        assert transform("ab\ncd\n\nef", 8) == "ab cd ef"

    def test_information_separator_stays_inside_word(self):
        assert transform("a\x1cb", 3) == "a\x1cb"
        assert transform("a\x1fb cd", 2).split("\n") == ["a\x1f", "b ", "cd"]


class TestLineWidthValidation:
    """Tests for rejecting unusable line widths."""

    def test_zero_width(self):
        with pytest.raises(InvalidLineWidthError):
            transform("lorem ipsum", 0)

    def test_negative_width(self):
        with pytest.raises(InvalidLineWidthError):
            transform("lorem", -3)

    @pytest.mark.parametrize("line_width", [4.0, "4", None, True])
    def test_non_integer_width(self, line_width):
        with pytest.raises(InvalidLineWidthError):
            transform("lorem", line_width)

    def test_error_hierarchy(self):
        assert issubclass(InvalidLineWidthError, JustifyError)
        assert issubclass(InvalidLineWidthError, ValueError)

    def test_valid_width_returned(self):
        assert validate_line_width(12) == 12


class TestLineHelpers:
    """Tests for the line-level entry points."""

    def test_justify_lines(self):
        assert justify_lines("consectetur", 4) == ["cons", "ecte", "tur "]

    def test_justify_lines_empty(self):
        assert justify_lines("", 4) == []

    def test_iter_lines_is_lazy(self):
        lines = iter_lines("lorem ipsum dolor sit amet", 5)
        assert next(lines) == "lorem"
        assert next(lines) == "ipsum"

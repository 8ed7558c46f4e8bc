"""Unit tests for slug and reading-time helpers."""

import pytest

from utils.slug import estimate_reading_time, generate_slug, humanize_slug


class TestGenerateSlug:
    """Tests for generate_slug function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello, World!", "hello-world"),
            ("  --Foo--  ", "foo"),
            ("Python 3.12 Release Notes", "python-3-12-release-notes"),
            ("already-a-slug", "already-a-slug"),
            ("Café au lait", "caf-au-lait"),
        ],
    )
    def test_generate_slug(self, text, expected):
        assert generate_slug(text) == expected

    def test_only_separators_gives_empty_slug(self):
        """Text without any [a-z0-9] character has no slug."""
        assert generate_slug("!!! ---") == ""
        assert generate_slug("") == ""

    def test_idempotent(self):
        slug = generate_slug("  Some *Weird* Title?? ")
        assert generate_slug(slug) == slug

    def test_output_alphabet(self):
        slug = generate_slug("A  b__c//D  e")
        assert slug == "a-b-c-d-e"
        assert "--" not in slug


class TestEstimateReadingTime:
    """Tests for estimate_reading_time function."""

    def test_400_words_reads_in_two_minutes(self):
        assert estimate_reading_time(" ".join(["word"] * 400)) == 2

    def test_rounds_up(self):
        assert estimate_reading_time(" ".join(["word"] * 201)) == 2
        assert estimate_reading_time("one") == 1

    def test_markup_is_not_counted(self):
        html = "<p>" + " ".join(["word"] * 200) + '</p><img src="a.png" alt="x">'
        assert estimate_reading_time(html) == 1

    def test_empty_content_reads_in_zero_minutes(self):
        assert estimate_reading_time("") == 0
        assert estimate_reading_time("<p></p>") == 0

    def test_monotonic_in_word_count(self):
        times = [estimate_reading_time(" ".join(["w"] * n)) for n in range(0, 1000, 50)]
        assert times == sorted(times)

    def test_custom_words_per_minute(self):
        assert estimate_reading_time(" ".join(["word"] * 300), words_per_minute=100) == 3


class TestHumanizeSlug:
    """Tests for humanize_slug function."""

    def test_single_word(self):
        assert humanize_slug("python") == "Python"

    def test_only_first_hyphen_becomes_space(self):
        assert humanize_slug("web-dev-tips") == "Web Dev-Tips"

"""Tests for labels module"""

import pytest

from autoform.labels import humanize, split_words


class TestHumanize:
    """Tests for humanize function"""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("user_name", "User Name"),
            ("tag_list", "Tag List"),
            ("config-value", "Config Value"),
            ("firstName", "First Name"),
            ("XMLParser", "XML Parser"),
            ("userID", "User ID"),
            ("email", "Email"),
        ],
    )
    def test_humanize_key_styles(self, key, expected):
        """Test each supported key style"""
        assert humanize(key) == expected

    def test_humanize_collapses_repeated_separators(self):
        """Test leading, trailing and doubled separators produce single spaces"""
        assert humanize("__created__at-") == "Created At"

    def test_humanize_mixed_styles(self):
        """Test keys combining snake_case and camelCase"""
        assert humanize("billing_addressLine2") == "Billing Address Line2"

    def test_humanize_empty_key(self):
        """Test empty key yields empty label"""
        assert humanize("") == ""


class TestSplitWords:
    """Tests for split_words function"""

    def test_split_acronym_followed_by_word(self):
        assert split_words("HTMLToPDF") == ["HTML", "To", "PDF"]

    def test_split_keeps_lowercase_word_intact(self):
        assert split_words("name") == ["name"]

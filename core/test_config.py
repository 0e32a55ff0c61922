"""
Tests for environment list parsing.
"""
from core.config import parse_origin_list

DEFAULT_ORIGINS = ['https://tymai-dev.github.io', 'https://halohub.com']


class TestParseOriginList:

    def test_unset_uses_default(self):
        assert parse_origin_list(None, DEFAULT_ORIGINS) == DEFAULT_ORIGINS

    def test_empty_string_uses_default(self):
        assert parse_origin_list('', DEFAULT_ORIGINS) == DEFAULT_ORIGINS

    def test_only_commas_and_spaces_uses_default(self):
        assert parse_origin_list(' , ,, ', DEFAULT_ORIGINS) == DEFAULT_ORIGINS

    def test_entries_are_trimmed_and_blanks_dropped(self):
        origins = parse_origin_list(
            ' https://a.example ,, https://b.example,  ', DEFAULT_ORIGINS
        )

        assert origins == ['https://a.example', 'https://b.example']

    def test_single_origin_replaces_default(self):
        assert parse_origin_list('https://a.example', DEFAULT_ORIGINS) == ['https://a.example']

    def test_default_is_not_shared(self):
        origins = parse_origin_list(None, DEFAULT_ORIGINS)
        origins.append('https://c.example')

        assert DEFAULT_ORIGINS == ['https://tymai-dev.github.io', 'https://halohub.com']

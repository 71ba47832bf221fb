"""Tests for the notation predicates."""

import pytest
from hypothesis import given, settings

from jvmsig.types_ import is_binary_name, is_class_get_name, is_field_descriptor

from strategies import binary_names, field_descriptors


class TestPredicates:
    @pytest.mark.parametrize(
        "s, expected",
        [
            ("int", True),
            ("java.lang.Object[][]", True),
            ("java/lang/Object", False),
            ("java..Object", False),
            ("", False),
            ("[I", False),
            ("java.lang.Object[", False),
        ],
    )
    def test_is_binary_name(self, s, expected):
        assert is_binary_name(s) is expected

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("I", True),
            ("[[Ljava/lang/Object;", True),
            ("Ljava.lang.Object;", False),
            ("L;", False),
            ("V", False),
            ("int", False),
        ],
    )
    def test_is_field_descriptor(self, s, expected):
        assert is_field_descriptor(s) is expected

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("int", True),
            ("java.lang.String", True),
            ("[Ljava.lang.String;", True),
            ("[[I", True),
            ("[Ljava/lang/String;", False),
            ("java.lang.String[]", False),
        ],
    )
    def test_is_class_get_name(self, s, expected):
        assert is_class_get_name(s) is expected

    @settings(deadline=None)
    @given(binary_names())
    def test_generated_binary_names(self, name):
        assert is_binary_name(name)

    @settings(deadline=None)
    @given(field_descriptors())
    def test_generated_field_descriptors(self, descriptor):
        assert is_field_descriptor(descriptor)

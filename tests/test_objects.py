# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Rectangle, get_json and from_json."""

import json

import pytest

from css_selector_builder import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius


class TestRectangle:
    """Tests for Rectangle."""

    def test_fields(self):
        """Test width and height are readable."""
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        """Test area is width times height."""
        assert Rectangle(10, 20).get_area() == 200
        assert Rectangle(2.5, 4).get_area() == 10.0

    def test_repr(self):
        """Test string representation."""
        assert repr(Rectangle(1, 2)) == 'Rectangle(1, 2)'


class TestGetJson:
    """Tests for get_json."""

    def test_list(self):
        """Test lists render as compact bracketed lists."""
        assert get_json([1, 2, 3]) == '[1,2,3]'

    def test_dict(self):
        """Test dicts render as compact objects."""
        assert json.loads(get_json({'width': 10, 'height': 20})) == {
            'width': 10, 'height': 20,
        }

    def test_object_attributes(self):
        """Test plain objects render their attributes without methods."""
        assert json.loads(get_json(Rectangle(10, 20))) == {'width': 10, 'height': 20}

    def test_nested_objects(self):
        """Test objects nested in containers are serialized."""
        assert json.loads(get_json([Circle(1), {'c': Circle(2)}])) == [
            {'radius': 1}, {'c': {'radius': 2}},
        ]

    def test_non_ascii(self):
        """Test non-ASCII text is kept as is."""
        assert get_json(['é']) == '["é"]'

    def test_unserializable(self):
        """Test objects without attributes raise TypeError."""
        with pytest.raises(TypeError, match='not JSON serializable'):
            get_json(object())


class TestFromJson:
    """Tests for from_json."""

    def test_from_class(self):
        """Test building an instance from a class."""
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert (r.width, r.height) == (10, 20)

    def test_from_instance(self):
        """Test building an instance from an exemplar object."""
        c = from_json(Circle(0), '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_values_are_positional(self):
        """Test values are passed in serialized order."""
        r = from_json(Rectangle, '{"height":3,"width":5}')
        assert r.width == 3
        assert r.height == 5

    def test_array(self):
        """Test a JSON array is passed positionally."""
        r = from_json(Rectangle, '[4, 5]')
        assert r.get_area() == 20

    def test_round_trip(self):
        """Test get_json then from_json preserves the fields."""
        original = Rectangle(7, 3)
        copy = from_json(original, get_json(original))
        assert copy is not original
        assert (copy.width, copy.height) == (7, 3)
        assert copy.get_area() == original.get_area()

    def test_scalar_gives_no_arguments(self):
        """Test a scalar JSON value calls the constructor with no arguments."""

        class Empty:
            pass

        assert isinstance(from_json(Empty, '5'), Empty)
        with pytest.raises(TypeError):
            from_json(Rectangle, '5')

    def test_invalid_json(self):
        """Test invalid JSON raises JSONDecodeError."""
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, '{width: 1}')

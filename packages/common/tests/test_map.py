"""Tests for map()."""

from collections import OrderedDict

import pytest

from tgui_common import UnsupportedCollectionError, identity, map
from tgui_common import config


class Point:
    kind = "point"

    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestMapSequences:
    """Lists and tuples are mapped element by element."""

    def test_list(self):
        assert map(lambda x: x * 2)([1, 2, 3]) == [2, 4, 6]

    def test_tuple_returns_list(self):
        assert map(lambda x: x + 1)((1, 2)) == [2, 3]

    def test_empty_list(self):
        assert map(identity)([]) == []

    def test_iteratee_receives_index_and_collection(self):
        items = ["a", "b"]
        assert map(lambda v, i, c: (v, i, c is items))(items) == [
            ("a", 0, True),
            ("b", 1, True),
        ]

    def test_varargs_iteratee_gets_all_three(self):
        items = [7]
        assert map(lambda *args: args)(items) == [(7, 0, items)]


class TestMapMappings:
    """Dict values are mapped in insertion order."""

    def test_keys_in_order(self):
        assert map(lambda v, k: k)({"a": 1, "b": 2}) == ["a", "b"]

    def test_values(self):
        assert map(lambda v: v * 10)({"a": 1, "b": 2}) == [10, 20]

    def test_ordered_dict(self):
        data = OrderedDict([("z", 1), ("y", 2)])
        assert map(lambda v, k, c: (k, v, c is data))(data) == [
            ("z", 1, True),
            ("y", 2, True),
        ]

    def test_plain_object_own_attributes(self):
        # class attribute `kind` is not an own attribute
        assert map(lambda v, k: (k, v))(Point(1, 2)) == [("x", 1), ("y", 2)]


class TestMapUnsupported:
    """Values that cannot be iterated raise UnsupportedCollectionError."""

    @pytest.mark.parametrize(
        "value, type_name",
        [
            (42, "number"),
            (1.5, "number"),
            ("abc", "string"),
            (True, "boolean"),
            (len, "function"),
            ({1, 2}, "set"),
        ],
    )
    def test_error_names_runtime_type(self, value, type_name):
        with pytest.raises(UnsupportedCollectionError) as exc_info:
            map(identity)(value)
        assert exc_info.value.type_name == type_name
        assert str(exc_info.value) == f"map() can't iterate on type {type_name}"

    def test_is_a_type_error(self):
        with pytest.raises(TypeError, match="number"):
            map(identity)(42)

    def test_iteratee_error_propagates(self):
        def boom(v):
            raise RuntimeError("iteratee failed")

        with pytest.raises(RuntimeError, match="iteratee failed"):
            map(boom)([1])


class TestMapNone:
    """None handling follows map.null_passthrough."""

    def test_none_passes_through_by_default(self):
        assert map(identity)(None) is None

    def test_none_rejected_when_disabled(self):
        with pytest.raises(UnsupportedCollectionError, match="null"):
            map(identity, null_passthrough=False)(None)

    def test_config_file_does_not_change_default(self, tmp_path, monkeypatch):
        path = tmp_path / "strict.yaml"
        path.write_text("map:\n  null_passthrough: false\n", encoding="utf-8")
        monkeypatch.setenv("TGUI_COMMON_CONFIG", str(path))
        config.get_config.cache_clear()

        assert map(identity)(None) is None

    def test_unreadable_config_does_not_affect_map(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TGUI_COMMON_CONFIG", str(tmp_path))
        config.get_config.cache_clear()

        assert map(identity)([1, 2]) == [1, 2]

    def test_caller_passes_config_value(self, tmp_path, monkeypatch):
        path = tmp_path / "strict.yaml"
        path.write_text("map:\n  null_passthrough: false\n", encoding="utf-8")
        monkeypatch.setenv("TGUI_COMMON_CONFIG", str(path))
        config.get_config.cache_clear()

        strict_map = map(identity, null_passthrough=config.get_config().map.null_passthrough)
        with pytest.raises(UnsupportedCollectionError, match="null"):
            strict_map(None)

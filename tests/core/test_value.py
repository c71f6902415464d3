"""
Unit Tests for Value Model

Tests for the numeric container accessors and its JSON mapping.
"""

import pytest

from pif_toolkit.core.errors import IndexOutOfRange, LeafParseError, ParseError, ShapeError
from pif_toolkit.core.models.scalar import Scalar
from pif_toolkit.core.models.value import Value


def scalars(*values):
    return [Scalar.of(v) for v in values]


class TestValueAccessors:
    """Tests for add/num/get/iter accessors."""

    # ─────────────────────────────────────────────────────────────────────────
    # Empty State
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_empty_then_all_lists_absent(self):
        """A new Value has no lists allocated."""
        v = Value()
        assert v.scalars is None and v.vectors is None and v.matrices is None
        assert v.num_scalars() == v.num_vectors() == v.num_matrices() == 0

    def test_iter_when_absent_then_empty_and_restartable(self):
        """Iterating absent lists yields nothing, every time."""
        v = Value()
        for _ in range(2):
            assert list(v.iter_scalars()) == []
            assert list(v.iter_vectors()) == []
            assert list(v.iter_matrices()) == []

    @pytest.mark.parametrize("getter", ["get_scalar", "get_vector", "get_matrix"])
    @pytest.mark.parametrize("index", [0, 1, -1])
    def test_get_when_absent_then_raises(self, getter, index):
        """Any index on an absent list is out of range."""
        with pytest.raises(IndexOutOfRange):
            getattr(Value(), getter)(index)

    # ─────────────────────────────────────────────────────────────────────────
    # Populated State
    # ─────────────────────────────────────────────────────────────────────────

    def test_add_scalar_when_called_then_allocates_and_appends(self):
        v = Value().add_scalar(Scalar.of(1)).add_scalar(Scalar.of(2))
        assert v.num_scalars() == 2
        assert v.get_scalar(1) == Scalar.of(2)

    def test_add_when_chained_then_returns_self(self):
        """add_* methods return the container."""
        v = Value()
        assert v.add_scalar(Scalar.of(1)) is v
        assert v.add_vector(scalars(1)) is v
        assert v.add_matrix([scalars(1)]) is v

    def test_add_vector_when_tuple_then_stored_as_list_copy(self):
        """The container owns its vectors."""
        source = scalars(1, 2)
        v = Value().add_vector(source)
        source.append(Scalar.of(3))
        assert v.get_vector(0) == scalars(1, 2)

    def test_add_matrix_when_called_then_rows_copied(self):
        rows = [scalars(1, 2), scalars(3, 4)]
        v = Value().add_matrix(rows)
        rows[0].append(Scalar.of(9))
        assert v.get_matrix(0) == [scalars(1, 2), scalars(3, 4)]

    def test_lists_when_mixed_then_independent(self):
        """Scalars, vectors and matrices are independent."""
        v = Value().add_scalar(Scalar.of(1)).add_matrix([scalars(1, 2)])
        assert v.num_scalars() == 1
        assert v.num_vectors() == 0
        assert v.num_matrices() == 1

    @pytest.mark.parametrize("index", [2, -1, 100])
    def test_get_when_out_of_range_then_raises(self, index):
        v = Value().add_vector(scalars(1)).add_vector(scalars(2))
        with pytest.raises(IndexOutOfRange):
            v.get_vector(index)

    def test_get_when_out_of_range_then_message_names_index_and_count(self):
        v = Value().add_scalar(Scalar.of(1))
        with pytest.raises(IndexOutOfRange, match="scalar 3 of 1"):
            v.get_scalar(3)

    def test_get_when_out_of_range_then_is_index_error(self):
        """IndexOutOfRange can be caught as a builtin IndexError."""
        with pytest.raises(IndexError):
            Value().get_matrix(0)

    def test_count_when_populated_then_matches_iteration(self):
        v = Value()
        for i in range(3):
            v.add_scalar(Scalar.of(i)).add_vector(scalars(i, i))
        v.add_matrix([scalars(1)])
        assert v.num_scalars() == len(list(v.iter_scalars()))
        assert v.num_vectors() == len(list(v.iter_vectors()))
        assert v.num_matrices() == len(list(v.iter_matrices()))

    def test_with_name_when_called_then_sets_and_returns_self(self):
        v = Value()
        assert v.with_name("density").with_units("g/cm^3") is v
        assert (v.name, v.units) == ("density", "g/cm^3")

    def test_name_when_set_to_empty_then_stored(self):
        """Setters store empty strings and None without special cases."""
        v = Value(name="x", units="m")
        v.name = ""
        v.units = None
        assert v.name == ""
        assert v.units is None


class TestValueSerialization:
    """Tests for Value.to_dict / Value.from_dict."""

    def test_to_dict_when_empty_then_empty_object(self):
        assert Value().to_dict() == {}

    def test_to_dict_when_absent_lists_then_omitted(self):
        """Absent lists are left out, not written as null or []."""
        data = Value(name="x").add_vector(scalars(1)).to_dict()
        assert "scalars" not in data
        assert "matrices" not in data

    def test_to_dict_when_allocated_but_empty_then_empty_array(self):
        """An allocated list is written even when empty."""
        v = Value(scalars=[])
        assert v.to_dict() == {"scalars": []}

    def test_to_dict_when_single_vector_then_general_form(self):
        """One vector is still written as a list of vectors."""
        v = Value().add_vector(scalars(1, 2))
        assert v.to_dict() == {"vectors": [[1, 2]]}

    def test_to_dict_when_matrix_then_three_levels(self):
        v = Value().add_matrix([scalars(1, 2), scalars(3, 4)])
        assert v.to_dict() == {"matrices": [[[1, 2], [3, 4]]]}

    def test_roundtrip_when_two_vectors_then_preserved(self):
        """name, units and vectors survive; other lists stay absent."""
        v = Value(name="x", units="m").add_vector(scalars(1, 2)).add_vector(scalars(3, 4))

        data = v.to_dict()
        restored = Value.from_dict(data)

        assert "scalars" not in data and "matrices" not in data
        assert restored.name == "x"
        assert restored.units == "m"
        assert list(restored.iter_vectors()) == [scalars(1, 2), scalars(3, 4)]
        assert restored.scalars is None
        assert restored.matrices is None
        assert restored == v

    def test_from_dict_when_flat_vector_then_one_element_list(self):
        """The single-vector input form normalizes to the list form."""
        v = Value.from_dict({"vectors": [1, 2, 3]})
        assert v.num_vectors() == 1
        assert v.to_dict() == {"vectors": [[1, 2, 3]]}

    def test_from_dict_when_single_matrix_then_one_matrix(self):
        v = Value.from_dict({"matrices": [[1, 0], [0, 1]]})
        assert v.num_matrices() == 1
        assert v.get_matrix(0) == [scalars(1, 0), scalars(0, 1)]

    def test_from_dict_when_scalars_then_parsed(self):
        v = Value.from_dict({"scalars": [1, {"value": 2, "uncertainty": 0.1}]})
        assert v.get_scalar(0) == Scalar.of(1)
        assert v.get_scalar(1).uncertainty == 0.1

    def test_from_dict_when_null_lists_then_absent(self):
        """null is the same as a missing property."""
        v = Value.from_dict({"scalars": None, "vectors": None, "matrices": None, "name": None})
        assert v == Value()

    def test_from_dict_when_unknown_field_then_roundtrips(self):
        data = {"name": "x", "vectors": [[1]], "futureField": {"a": 1}}
        v = Value.from_dict(data)
        assert v.get_unsupported_field("futureField") == {"a": 1}
        assert v.to_dict() == data

    def test_from_dict_when_numeric_units_then_coerced_to_string(self):
        v = Value.from_dict({"name": 7, "units": True})
        assert v.name == "7"
        assert v.units == "true"

    def test_from_dict_when_object_name_then_raises(self):
        with pytest.raises(ParseError) as exc_info:
            Value.from_dict({"name": {"en": "x"}})
        assert exc_info.value.path == "name"

    def test_from_dict_when_flat_matrix_then_shape_error(self):
        """Malformed shapes fail the whole parse."""
        with pytest.raises(ShapeError) as exc_info:
            Value.from_dict({"name": "x", "matrices": [1, 2, 3]})
        assert exc_info.value.path == "matrices"

    def test_from_dict_when_scalars_not_array_then_shape_error(self):
        with pytest.raises(ShapeError):
            Value.from_dict({"scalars": 5})

    def test_from_dict_when_bad_leaf_then_leaf_error_propagates(self):
        with pytest.raises(LeafParseError) as exc_info:
            Value.from_dict({"vectors": [[1, None]]})
        assert exc_info.value.path == "vectors[0][1]"

    def test_from_dict_when_custom_leaf_parser_then_used(self):
        """The leaf parser is pluggable."""
        v = Value.from_dict({"vectors": [[1, 2]]}, leaf_parser=lambda node, ctx: node * 10)
        assert v.get_vector(0) == [10, 20]
        assert v.to_dict() == {"vectors": [[10, 20]]}

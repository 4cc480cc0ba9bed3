import itertools

import pytest

from spamnet.tensor import Tensor, apply, matrix_product, transpose_2d


def make(*shape):
    size = 1
    for d in shape:
        size *= d
    return Tensor(*shape, data=range(size))


def test_new_tensor_is_zero_filled():
    t = Tensor(2, 3)
    assert t.shape == (2, 3)
    assert t.size == 6
    assert all(v == 0 for v in t)


def test_data_size_mismatch_raises():
    with pytest.raises(ValueError, match="Data size does not match tensor size"):
        Tensor(2, 2, data=[1, 2, 3])


def test_element_access_is_row_major():
    t = make(2, 3)
    assert t[1, 2] == 5
    assert t[0, 1] == 1
    assert t[1, 0] == 3


def test_wrong_number_of_indices_raises():
    t = make(2, 3)
    with pytest.raises(ValueError) as excinfo:
        t[1]
    assert str(excinfo.value) == "Number of dimensions do not match with 2"
    assert t.data == list(range(6))


def test_out_of_range_index_raises():
    with pytest.raises(IndexError):
        make(2, 3)[2, 0]


def test_setitem_round_trip():
    t = Tensor(3, 3)
    t[2, 1] = 7.5
    assert t[2, 1] == 7.5
    assert t.data.count(7.5) == 1


def test_fill_sets_every_element():
    t = make(2, 4)
    t.fill(3)
    assert t.data == [3] * 8


def test_assign_round_trip_and_size_check():
    t = Tensor(2, 2)
    t.assign([4, 3, 2, 1])
    assert t.data == [4, 3, 2, 1]
    with pytest.raises(ValueError, match="Data size does not match tensor size"):
        t.assign([1, 2])


def test_reshape_preserves_data():
    t = make(2, 3)
    t.reshape(3, 2)
    assert t.shape == (3, 2)
    assert t.data == list(range(6))


def test_reshape_grow_pads_with_zero_and_shrink_truncates():
    t = make(2, 2)
    t.reshape(2, 3)
    assert t.data[:4] == [0, 1, 2, 3]
    assert t.data[4:] == [0, 0]
    t.reshape(1, 2)
    assert t.data == [0, 1]


def test_reshape_wrong_rank_raises():
    with pytest.raises(ValueError, match="Number of dimensions do not match"):
        make(2, 2).reshape(4)


def test_broadcast_shape():
    assert Tensor.broadcast_shape((2, 1), (1, 3)) == (2, 3)
    assert Tensor.broadcast_shape((4, 5), (4, 5)) == (4, 5)


def test_broadcast_shape_incompatible():
    with pytest.raises(ValueError, match="not compatible for broadcasting"):
        Tensor.broadcast_shape((2, 3), (3, 3))


def test_addition_with_row_broadcast():
    a = make(2, 3)
    row = Tensor(1, 3, data=[10, 20, 30])
    result = a + row
    assert result.shape == (2, 3)
    for i, j in itertools.product(range(2), range(3)):
        assert result[i, j] == a[i, j] + row[0, j]


def test_broadcast_is_symmetric_for_addition():
    a = make(3, 1)
    b = make(1, 4)
    assert a + b == b + a
    assert (a + b).shape == (3, 4)


def test_incompatible_tensor_addition_raises():
    with pytest.raises(ValueError):
        make(2, 3) + make(3, 2)


def test_tensor_subtraction_inverts_addition():
    a = make(2, 3)
    b = Tensor(2, 3, data=[5, -1, 2, 8, 0, 3])
    assert (a + b) - b == a


def test_elementwise_product_is_commutative():
    a = make(2, 3)
    b = Tensor(2, 3, data=[5, -1, 2, 8, 0, 3])
    assert a * b == b * a


def test_scalar_operations_round_trip():
    t = make(2, 3)
    assert t * 2 == t + t
    assert 2 * t == t * 2
    assert (t + 5) - 5 == t
    assert 5 + t == t + 5
    assert (t * 4) / 4 == t


def test_scalar_minus_tensor_is_negated_difference():
    t = make(2, 2)
    assert 5 - t == -(t - 5)


def test_str_of_matrix():
    t = Tensor(2, 2, data=[1, 2, 3, 4])
    assert str(t) == "{\n    1 2\n    3 4\n}"


def test_str_of_vector_and_float_formatting():
    assert str(Tensor(3, data=[1, 2, 3])) == "1 2 3"
    assert str(Tensor(2, data=[0.5, 1.0])) == "0.5 1"


def test_transpose_swaps_shape_and_elements():
    t = make(2, 3)
    r = transpose_2d(t)
    assert r.shape == (3, 2)
    for i, j in itertools.product(range(2), range(3)):
        assert r[j, i] == t[i, j]


def test_transpose_twice_is_identity():
    t = make(2, 3, 4)
    assert transpose_2d(transpose_2d(t)) == t
    assert transpose_2d(t).shape == (2, 4, 3)


def test_transpose_of_vector_raises():
    with pytest.raises(ValueError, match="Cannot transpose 1D tensor"):
        transpose_2d(make(3))


def test_matrix_product_worked_example():
    a = Tensor(2, 2, data=[1, 2, 3, 4])
    b = Tensor(2, 2, data=[5, 6, 7, 8])
    assert matrix_product(a, b).data == [19, 22, 43, 50]


def test_matrix_product_with_identity():
    a = make(2, 3)
    identity = Tensor(3, 3, data=[1, 0, 0, 0, 1, 0, 0, 0, 1])
    assert matrix_product(a, identity) == a


def test_matrix_product_shape_and_transpose_identity():
    a = make(2, 3)
    b = Tensor(3, 4, data=[(v * 7) % 5 - 2 for v in range(12)])
    ab = matrix_product(a, b)
    assert ab.shape == (2, 4)
    assert transpose_2d(ab) == matrix_product(transpose_2d(b), transpose_2d(a))


def test_matrix_product_is_associative():
    a = make(2, 3)
    b = Tensor(3, 2, data=[1, -1, 2, 0, 3, 1])
    c = Tensor(2, 2, data=[2, 1, -1, 4])
    assert matrix_product(matrix_product(a, b), c) == matrix_product(a, matrix_product(b, c))


def test_batched_matrix_product_matches_per_batch():
    a = make(2, 2, 3)
    b = Tensor(2, 3, 2, data=[(v * 3) % 4 for v in range(12)])
    result = matrix_product(a, b)
    assert result.shape == (2, 2, 2)
    for batch in range(2):
        a_slice = Tensor(2, 3, data=a.data[batch * 6:(batch + 1) * 6])
        b_slice = Tensor(3, 2, data=b.data[batch * 6:(batch + 1) * 6])
        assert result.data[batch * 4:(batch + 1) * 4] == matrix_product(a_slice, b_slice).data


def test_matrix_product_incompatible_inner_dimension():
    with pytest.raises(ValueError, match="incompatible for multiplication"):
        matrix_product(make(2, 3), make(2, 3))


def test_matrix_product_batch_mismatch():
    with pytest.raises(ValueError, match="Batch dimensions do not match"):
        matrix_product(make(2, 2, 3), make(3, 3, 2))


def test_matrix_product_of_vectors_raises():
    with pytest.raises(ValueError, match="Need at least 2D tensors"):
        matrix_product(make(3), make(3))


def test_apply_round_trip_and_original_untouched():
    t = make(2, 3)
    doubled = apply(t, lambda v: v * 2)
    assert doubled == t * 2
    assert apply(doubled, lambda v: v // 2) == t
    assert t.data == list(range(6))


def test_map_matches_apply():
    t = Tensor(2, 2, data=[-1, 2, -3, 4])
    assert t.map(abs) == apply(t, abs)
    assert all(v >= 0 for v in t.map(abs))


def test_equality_depends_on_shape():
    assert make(2, 3) != make(3, 2)
    assert make(2, 3) == make(2, 3)
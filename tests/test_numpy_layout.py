import pytest

layout_parametrizations = []

layout_parametrizations.append(
    pytest.param([5, 10], id="2d"))
layout_parametrizations.append(
    pytest.param([1, 10], id="2d-row"))
layout_parametrizations.append(
    pytest.param([10, 1], id="2d-column"))
layout_parametrizations.append(
    pytest.param([7, 5, 3], id="3d"))
layout_parametrizations.append(
    pytest.param([7, 5, 3, 2], id="4d"))


@pytest.mark.parametrize("c_ordered_array_fixture",
                         layout_parametrizations,
                         indirect=["c_ordered_array_fixture"])
def test_lin_to_cart_matches_memory_layout(c_ordered_array_fixture):

    import numpy as np

    from cartlin import lin_to_cart

    m = c_ordered_array_fixture
    dim_size = m.shape
    itemsize = m.itemsize

    # Neighbouring linear indices must be neighbouring in memory
    base = m.__array_interface__["data"][0]
    for index in range(m.size):
        cart_index = lin_to_cart(index, dim_size)
        assert m[cart_index] == index

        address = base + int(np.dot(cart_index, m.strides))
        assert address == base + index*itemsize

    # And visited in the same order as numpy's own iteration
    cart_indices = [lin_to_cart(index, dim_size) for index in range(m.size)]
    assert cart_indices == [index for index, _ in np.ndenumerate(m)]


@pytest.mark.parametrize("c_ordered_array_fixture",
                         layout_parametrizations,
                         indirect=["c_ordered_array_fixture"])
def test_cart_to_lin_matches_numpy(c_ordered_array_fixture):

    import numpy as np

    from cartlin import cart_to_lin
    from cartlin import lin_to_cart

    m = c_ordered_array_fixture
    dim_size = m.shape

    for cart_index, value in np.ndenumerate(m):
        index = cart_to_lin(cart_index, dim_size)
        assert index == value
        assert index == np.ravel_multi_index(cart_index, dim_size)
        assert lin_to_cart(index, dim_size) == tuple(np.unravel_index(index, dim_size))

import logging

logger = logging.getLogger(__name__)


def _volume(dim_size):
    # Exact (unbounded) product, 1 for a zero-dimensional grid
    volume = 1
    for bound in dim_size:
        volume = volume*int(bound)
    return volume


def valid_indices(indices, dim_size):
    r"""Checks whether a Cartesian index addresses an element of a grid.

    This is the case if every coordinate is in ``[0, dim_size[axis])`` and if
    `indices` has exactly one coordinate per axis.  The length check is made
    even when the overlapping coordinates are all in bounds, so too short or
    too long indices are always invalid.

    Parameters
    ----------
    indices : sequence
        Candidate Cartesian index.
    dim_size : sequence
        Exclusive upper bound of each axis.

    Returns
    -------
    True if `indices` is a valid index into the grid.

    """

    for cart_index, bound in zip(indices, dim_size):
        if cart_index < 0 or cart_index >= bound:
            return False
    return len(indices) == len(dim_size)


def cart_to_lin(indices, dim_size):
    r"""Converts a Cartesian index into a linear index (row-major).

    The last axis varies fastest.  For example, in a grid of size `(2, 3, 4)`
    the index `(1, 0, 2)` is at linear position ``1*12 + 0*4 + 2*1 = 14``.

    Parameters
    ----------
    indices : sequence
        Cartesian index, one coordinate per axis.
    dim_size : sequence
        Exclusive upper bound of each axis.

    Returns
    -------
    The linear index, or None if `indices` is out of bounds or does not have
    exactly one coordinate per axis.

    """

    if not valid_indices(indices, dim_size):
        logger.debug("rejecting cartesian index %s for grid %s",
                     tuple(indices), tuple(dim_size))
        return None

    return cart_to_lin_unchecked(indices, dim_size)


def cart_to_lin_unchecked(indices, dim_size):
    r"""Like :func:`cart_to_lin`, but without the checks.

    The axes are paired from the last one backwards and pairing stops at the
    shorter of the two sequences, so surplus leading entries of either are
    ignored.  An out-of-bounds index gives a well-defined but meaningless
    result, e.g. ``cart_to_lin_unchecked((1, 5), (2, 5)) == 10`` although a
    2 x 5 grid only has linear indices 0 to 9.

    Parameters
    ----------
    indices : sequence
        Cartesian index.
    dim_size : sequence
        Exclusive upper bound of each axis.

    Returns
    -------
    The linear index.

    """

    index = 0
    multiplier = 1
    for cart_index, bound in zip(reversed(indices), reversed(dim_size)):
        index += multiplier*int(cart_index)
        multiplier *= int(bound)
    return index


def lin_to_cart(index, dim_size):
    r"""Converts a linear index into a Cartesian index (row-major).

    For example, in a grid of size `(2, 3)` the linear index 4 is the
    Cartesian index `(1, 1)`.

    Parameters
    ----------
    index : int
        Linear index.
    dim_size : sequence
        Exclusive upper bound of each axis.

    Returns
    -------
    A tuple with one coordinate per axis, or None if `index` is not smaller
    than the number of elements in the grid.

    """

    if index < 0 or index >= _volume(dim_size):
        logger.debug("rejecting linear index %d for grid %s",
                     index, tuple(dim_size))
        return None

    return lin_to_cart_unchecked(index, dim_size)


def lin_to_cart_unchecked(index, dim_size):
    r"""Like :func:`lin_to_cart`, but without the checks.

    An out-of-range linear index wraps around, e.g.
    ``lin_to_cart_unchecked(6, (2, 3)) == (0, 0)``.

    """

    cart_indices = [0]*len(dim_size)
    lin_to_cart_dyn_unchecked(index, dim_size, cart_indices)
    return tuple(cart_indices)


def lin_to_cart_dyn(index, dim_size, cart_indices):
    r"""Like :func:`lin_to_cart`, but writes into `cart_indices` in place.

    This form works with any mutable sequence (a `list`, a `numpy.ndarray`,
    ...), so the same buffer can be reused across calls when the number of
    dimensions is only known at runtime.

    Parameters
    ----------
    index : int
        Linear index.
    dim_size : sequence
        Exclusive upper bound of each axis.
    cart_indices : mutable sequence
        Output buffer, one entry per axis.

    Raises
    ------
    ValueError
        If `cart_indices` and `dim_size` differ in length or `index` is out
        of bounds.  `cart_indices` is not modified in that case.

    """

    if len(dim_size) != len(cart_indices) or index < 0 or index >= _volume(dim_size):
        raise ValueError("length of sequences not equal or index out of bounds")

    lin_to_cart_dyn_unchecked(index, dim_size, cart_indices)


def lin_to_cart_dyn_unchecked(index, dim_size, cart_indices):
    r"""Like :func:`lin_to_cart_dyn`, but without the checks.

    The buffer is filled from its last entry backwards, one entry per axis
    of `dim_size`, also counted from the last.  If the buffer is shorter
    than `dim_size` only its entries are written, e.g. a one-entry buffer
    receives the coordinate of the last axis.  Leading surplus entries of a
    longer buffer are left untouched.

    Parameters
    ----------
    index : int
        Linear index.
    dim_size : sequence
        Exclusive upper bound of each axis.
    cart_indices : mutable sequence
        Output buffer.

    """

    index = int(index)

    # Fill the buffer from back to front by repeated truncating division
    positions = reversed(range(len(cart_indices)))
    for position, bound in zip(positions, reversed(dim_size)):
        index, remainder = divmod(index, int(bound))
        cart_indices[position] = remainder

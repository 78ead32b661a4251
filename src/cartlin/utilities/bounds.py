import logging

import numpy as np

logger = logging.getLogger(__name__)

# Cartesian and linear indices live in an unsigned 64-bit address space.
INDEX_DTYPE = np.uint64
MAX_INDEX = int(np.iinfo(INDEX_DTYPE).max)


def wrap_index(value):
    r"""Reduces an integer into the unsigned index range, modulo 2**64."""

    return int(value) & MAX_INDEX


def assemble_bounds(dim_size):
    r"""Builds the half-open bounds of a grid with the given dimension sizes.

    Every axis is bounded by ``[0, dim_size[axis])``.  For example, if
    `dim_size` is `(2, 3)`, the bounds are `((0, 2), (0, 3))`.

    Parameters
    ----------
    dim_size : iterable
        Exclusive upper bound of each axis.

    Returns
    -------
    A tuple of `(lower, upper)` pairs, one per axis.

    """

    return tuple([(0, int(d)) for d in dim_size])


def check_bounds(bounds):
    r"""Checks that every axis of `bounds` describes a non-empty range.

    Each entry must be a `(lower, upper)` pair with ``0 <= lower < upper``.

    Parameters
    ----------
    bounds : iterable
        Sequence of `(lower, upper)` pairs.

    Returns
    -------
    True if every pair is strictly increasing, False otherwise.

    """

    for axis, limits in enumerate(bounds):
        if len(limits) != 2:
            logger.debug("axis %d has %d limits, expected 2", axis, len(limits))
            return False
        lower, upper = limits
        if lower < 0 or upper <= lower:
            logger.debug("axis %d has non-increasing bounds [%d, %d)",
                         axis, lower, upper)
            return False
    return True


def compute_bounds_subshape(bounds):
    r"""Computes the extent of each axis of `bounds`.

    The extent is ``upper - lower`` in unsigned 64-bit arithmetic, so an
    axis with ``upper < lower`` wraps around to a very large extent rather
    than becoming negative.

    Parameters
    ----------
    bounds : iterable
        Sequence of `(lower, upper)` pairs.

    Returns
    -------
    A tuple with the extent of each axis.

    """

    return tuple([wrap_index(upper - lower) for lower, upper in bounds])


def compute_volume(subshape):
    r"""Computes the number of elements in a box of shape `subshape`.

    The product wraps modulo 2**64 and is 1 for a zero-dimensional box.

    Parameters
    ----------
    subshape : iterable
        Extent of each axis.

    Returns
    -------
    The (wrapped) product of all extents.

    """

    subshape = np.asarray(subshape, dtype=INDEX_DTYPE)

    return int(np.prod(subshape, dtype=INDEX_DTYPE))

import logging

from cartlin.conversion import lin_to_cart_unchecked
from cartlin.utilities.bounds import assemble_bounds
from cartlin.utilities.bounds import check_bounds
from cartlin.utilities.bounds import compute_bounds_subshape
from cartlin.utilities.bounds import compute_volume
from cartlin.utilities.bounds import wrap_index

logger = logging.getLogger(__name__)


class CartesianIndices:
    r"""An iterator over all Cartesian indices in a box.

    The multidimensional equivalent of `range`: yields every Cartesian index
    of a box in row-major order, the first axis varying slowest and the last
    axis varying fastest.  For example, ``CartesianIndices((2, 3))`` yields
    `(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)`.

    The box may be offset from the origin by constructing the iterator from
    per-axis ``[lower, upper)`` bounds with :meth:`from_bounds`.  Internally
    the iterator counts linear positions from 0 to `volume` and converts each
    one with :func:`cartlin.lin_to_cart_unchecked`, adding the lower bounds
    afterwards.

    The iterator is finite and forward-only; once exhausted it stays
    exhausted and a new iterator must be created to iterate again.

    Parameters
    ----------
    dim_size : iterable
        Exclusive upper bound of each axis.  The lower bounds are 0.  An axis
        of size 0 gives an empty iterator.

    Attributes
    ----------
    current : int
        Linear position of the next index to produce, counted from the start
        of the box.
    volume : int
        Number of indices in the box.  Iteration ends when `current` equals
        `volume`.
    subshape : tuple
        Extent of each axis.
    start_index : tuple
        Lower bound of each axis.
    bounds : tuple
        The ``(lower, upper)`` pair of each axis.
    """

    def __init__(self, dim_size):

        self._setup(assemble_bounds(dim_size))

    def _setup(self, bounds):

        self.bounds = tuple([(wrap_index(lower), wrap_index(upper))
                             for lower, upper in bounds])

        self.subshape = compute_bounds_subshape(self.bounds)
        self.start_index = tuple([lower for lower, _ in self.bounds])

        self.volume = compute_volume(self.subshape)
        self.current = 0

    @classmethod
    def from_bounds(cls, bounds):
        r"""Creates an iterator from the lower and upper bounds of each axis.

        Every axis must be a non-empty range, i.e., ``lower < upper``.

        Parameters
        ----------
        bounds : iterable
            One ``(lower, upper)`` pair per axis.

        Returns
        -------
        The iterator, or None if any axis has ``upper <= lower``.

        """

        bounds = tuple([tuple(limits) for limits in bounds])

        if not check_bounds(bounds):
            return None

        return cls.with_offsets_unchecked(bounds)

    @classmethod
    def with_offsets_unchecked(cls, bounds):
        r"""Like :meth:`from_bounds`, but without the checks.

        The iterator is always constructed.  The extent of each axis is
        computed in unsigned 64-bit arithmetic, so an axis with
        ``upper < lower`` wraps around to an enormous extent instead of being
        rejected, and the indices produced are meaningless for the grid.

        """

        obj = cls.__new__(cls)
        obj._setup(bounds)

        if any(upper < lower for lower, upper in obj.bounds):
            logger.debug("bounds %s wrap around, volume is %d",
                         obj.bounds, obj.volume)

        return obj

    def __iter__(self):
        return self

    def __next__(self):

        if self.current == self.volume:
            raise StopIteration

        # Position within the box, then shift it by the lower bounds
        index = lin_to_cart_unchecked(self.current, self.subshape)
        index = tuple([wrap_index(i + lower)
                       for i, lower in zip(index, self.start_index)])

        self.current += 1
        return index

    def nth(self, n):
        r"""Jumps to the `n`-th index of the box and returns it.

        Unlike :func:`itertools.islice`, `n` is an absolute position counted
        from the start of the box, not from the current position: ``nth(0)``
        always restarts at the first index, however far the iterator has
        advanced.  Iteration continues from position ``n + 1`` afterwards.

        `n` is not clamped.  Jumping past `volume` yields wrapped around,
        meaningless indices, and the iterator then no longer terminates.

        Parameters
        ----------
        n : int
            Absolute linear position in the box.

        Returns
        -------
        The Cartesian index at position `n`, or None if ``n == volume``.

        """

        self.current = n
        return next(self, None)

    def __length_hint__(self):
        return max(self.volume - self.current, 0)

    def __repr__(self):
        return (f"{type(self).__name__}(current={self.current}, "
                f"volume={self.volume}, subshape={self.subshape}, "
                f"bounds={self.bounds})")

def partition_range(n_parts, part, volume):
    r"""The half-open linear range covered by one part of a balanced split.

    The range ``[0, volume)`` is split into `n_parts` contiguous parts.  The
    first ``volume % n_parts`` parts hold one index more than the rest, so
    part sizes differ by at most one.  Every linear index belongs to exactly
    one part, so workers can convert their own range with
    :func:`cartlin.lin_to_cart` independently of each other.

    Parameters
    ----------
    n_parts : int
        Number of parts.
    part : int
        Which part, counting from 0.
    volume : int
        Total number of linear indices.

    Returns
    -------
    A `range` over the linear indices of `part`.

    Raises
    ------
    ValueError
        If `n_parts` is not positive or `part` is not in ``[0, n_parts)``.

    """

    if n_parts <= 0:
        raise ValueError("Number of parts must be positive.")
    if part < 0 or part >= n_parts:
        raise ValueError("Part index must be in [0, n_parts).")

    base, extra = divmod(int(volume), int(n_parts))

    # Parts before `extra` carry one additional index
    start = base*part + min(part, extra)
    stop = start + base + (1 if part < extra else 0)

    return range(start, stop)


def compute_subvolume(n_parts, part, volume):
    r"""Number of linear indices assigned to `part` by :func:`partition_range`."""

    return len(partition_range(n_parts, part, volume))

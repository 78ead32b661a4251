import pytest


@pytest.fixture(scope="function")
def c_ordered_array_fixture(request):
    import numpy as np

    shape = tuple(request.param)

    # Each element stores its own position in the flat, row-major storage
    return np.arange(int(np.prod(shape)), dtype=np.int64).reshape(shape, order="C")


@pytest.fixture(scope="function")
def debug_log_fixture(caplog):
    import logging

    caplog.set_level(logging.DEBUG, logger="cartlin")

    return caplog

import logging

from . import utilities  # noqa: F401
from .cartesian_indices import CartesianIndices  # noqa: F401
from .conversion import cart_to_lin  # noqa: F401
from .conversion import cart_to_lin_unchecked  # noqa: F401
from .conversion import lin_to_cart  # noqa: F401
from .conversion import lin_to_cart_dyn  # noqa: F401
from .conversion import lin_to_cart_dyn_unchecked  # noqa: F401
from .conversion import lin_to_cart_unchecked  # noqa: F401
from .conversion import valid_indices  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = ["CartesianIndices",
           "cart_to_lin",
           "cart_to_lin_unchecked",
           "lin_to_cart",
           "lin_to_cart_dyn",
           "lin_to_cart_dyn_unchecked",
           "lin_to_cart_unchecked",
           "valid_indices",
           ]

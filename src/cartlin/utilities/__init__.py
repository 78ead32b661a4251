from . import bounds  # noqa: F401
from . import partition  # noqa: F401

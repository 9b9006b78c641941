from .base import (  # noqa: F401
    Chain,
)
from .selection import (  # noqa: F401
    iter_ancestry,
    select_best,
)
from .tips import (  # noqa: F401
    find_tips,
)
from .work import (  # noqa: F401
    total_work,
)

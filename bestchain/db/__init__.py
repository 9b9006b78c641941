from .memo import (  # noqa: F401
    WorkMemo,
)
from .store import (  # noqa: F401
    BlockStore,
)

from importlib.metadata import (
    version as __version,
)

from bestchain.chain import (  # noqa: F401
    Chain,
    find_tips,
    select_best,
    total_work,
)
from bestchain.db import (  # noqa: F401
    BlockStore,
    WorkMemo,
)
from bestchain.rlp.blocks import (  # noqa: F401
    Block,
)

__version__ = __version("py-bestchain")

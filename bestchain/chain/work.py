from eth_utils import (
    get_extended_debug_logger,
)

from bestchain.abc import (
    BlockAPI,
    BlockStoreAPI,
    WorkMemoAPI,
)
from bestchain.exceptions import (
    CyclicAncestry,
)
from bestchain.typing import (
    Work,
)

logger = get_extended_debug_logger("bestchain.chain.work")


def total_work(memo: WorkMemoAPI, store: BlockStoreAPI, source: BlockAPI) -> Work:
    """
    Return the cumulative weight of ``source`` and all of its known ancestors.

    The walk follows parent links until it reaches a block whose parent is
    not in ``store``, or an ancestor whose total is already in ``memo``. In
    the latter case the memoized total is added and the walk stops early, so
    every value in ``memo`` must be the full root-inclusive total for its
    block.

    The memo is read, never written: recording the result is left to the
    caller.

    :raises CyclicAncestry: if the walk revisits a block
    """
    work = source.weight
    visited = {source.identity}
    visitor = source

    while True:
        parent = store.lookup(visitor.parent_identity)
        if parent is None:
            break

        memoized_work = memo.get(parent.identity)
        if memoized_work is not None:
            work += memoized_work
            break

        if parent.identity in visited:
            raise CyclicAncestry(parent.identity)
        visited.add(parent.identity)

        visitor = parent
        work += visitor.weight

    logger.debug2("Work for %s is %d after walking %d blocks", source, work, len(visited))
    return work

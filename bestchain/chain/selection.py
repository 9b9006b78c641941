from typing import (
    Iterable,
    Optional,
)

from eth_utils import (
    get_extended_debug_logger,
    to_tuple,
)

from bestchain.abc import (
    BlockAPI,
    BlockStoreAPI,
    WorkMemoAPI,
)
from bestchain.db.memo import (
    WorkMemo,
)
from bestchain.exceptions import (
    CyclicAncestry,
    NoCandidateBlocks,
)

from .base import (
    Chain,
)
from .work import (
    total_work,
)

logger = get_extended_debug_logger("bestchain.chain.selection")


@to_tuple
def iter_ancestry(store: BlockStoreAPI, block: BlockAPI) -> Iterable[BlockAPI]:
    """
    Yield ``block`` followed by each of its ancestors, ending with the first
    block whose parent is not in ``store``.

    :raises CyclicAncestry: if the walk revisits a block
    """
    visited = set()
    visitor: Optional[BlockAPI] = block
    while visitor is not None:
        if visitor.identity in visited:
            raise CyclicAncestry(visitor.identity)
        visited.add(visitor.identity)

        yield visitor
        visitor = store.lookup(visitor.parent_identity)


def select_best(store: BlockStoreAPI, memo: WorkMemoAPI = None) -> Chain:
    """
    Return the chain ending in the block with the most cumulative work.

    Every block in the store is a candidate tip, evaluated in the store's
    order (ascending identity). Each block's work is memoized as soon as it
    is computed. A candidate replaces the current best only with strictly
    more work, so among equal-work candidates the one with the lowest
    identity wins.

    :raises NoCandidateBlocks: if the store is empty
    :raises CyclicAncestry: if any block is its own ancestor
    """
    if memo is None:
        memo = WorkMemo()

    best_block: Optional[BlockAPI] = None
    most_work = 0

    for block in store.all():
        work = total_work(memo, store, block)
        memo.record(block.identity, work)

        if best_block is None or work > most_work:
            best_block = block
            most_work = work

    if best_block is None:
        raise NoCandidateBlocks("Cannot select a best chain from an empty store")

    chain = Chain(tuple(reversed(iter_ancestry(store, best_block))))
    logger.debug(
        "Selected chain of height %d with %d work from %d candidates",
        chain.height,
        most_work,
        len(store),
    )
    return chain

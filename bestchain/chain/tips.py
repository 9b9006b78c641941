from typing import (
    Iterable,
    Set,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    to_tuple,
)

from bestchain.abc import (
    BlockAPI,
    BlockStoreAPI,
)


def get_parents_with_children(store: BlockStoreAPI) -> Set[Hash32]:
    """
    Return the identities of every stored block that some other stored block
    builds on. Parents missing from the store are never included.
    """
    return {
        block.parent_identity
        for block in store.all()
        if block.parent_identity in store
    }


@to_tuple
def find_tips(store: BlockStoreAPI) -> Iterable[BlockAPI]:
    """
    Find all blocks that are not the parent of any other block in the store.

    Tips are returned in the store's iteration order. The result is empty
    only when the store is empty.
    """
    has_children = get_parents_with_children(store)
    for block in store.all():
        if block.identity not in has_children:
            yield block

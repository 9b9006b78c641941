from typing import (
    Dict,
    Iterable,
    Optional,
    Tuple,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
    get_extended_debug_logger,
)

from bestchain.abc import (
    BlockAPI,
    BlockStoreAPI,
)
from bestchain.exceptions import (
    BlockNotFound,
    StoreFinalized,
)
from bestchain.validation import (
    validate_word,
)


class BlockStore(BlockStoreAPI):
    """
    In-memory mapping of identity to block.

    Duplicate identities are not an error: the last insert wins. Once
    :meth:`finalize` has been called the ordering returned by :meth:`all` is
    fixed and further inserts are rejected.
    """

    logger = get_extended_debug_logger("bestchain.db.store.BlockStore")

    def __init__(self) -> None:
        self._blocks: Dict[Hash32, BlockAPI] = {}
        self._ordered: Optional[Tuple[BlockAPI, ...]] = None

    @classmethod
    def from_blocks(cls, blocks: Iterable[BlockAPI]) -> "BlockStore":
        store = cls()
        for block in blocks:
            store.insert(block)
        store.finalize()
        return store

    def insert(self, block: BlockAPI) -> None:
        if self.is_finalized:
            raise StoreFinalized(
                f"Cannot insert block {encode_hex(block.identity)} "
                "into a finalized store"
            )
        self._blocks[block.identity] = block

    def lookup(self, identity: Hash32) -> Optional[BlockAPI]:
        return self._blocks.get(identity)

    def get_block_by_identity(self, identity: Hash32) -> BlockAPI:
        validate_word(identity, title="Block Identity")
        try:
            return self._blocks[identity]
        except KeyError:
            raise BlockNotFound(f"No block with identity {encode_hex(identity)} found")

    def all(self) -> Tuple[BlockAPI, ...]:
        if self._ordered is not None:
            return self._ordered
        return self._sorted_blocks()

    def finalize(self) -> None:
        if self.is_finalized:
            return
        self._ordered = self._sorted_blocks()
        self.logger.debug("Sorted %d blocks", len(self._ordered))

    @property
    def is_finalized(self) -> bool:
        return self._ordered is not None

    def _sorted_blocks(self) -> Tuple[BlockAPI, ...]:
        return tuple(
            self._blocks[identity] for identity in sorted(self._blocks)
        )

    def __contains__(self, identity: object) -> bool:
        return identity in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Any,
    Dict,
    Hashable,
    Iterator,
    Optional,
    Sequence,
    Tuple,
)

from eth_typing import (
    Hash32,
)

from bestchain.typing import (
    HeightRecords,
    Weight,
    Work,
)


class BlockAPI(ABC):
    """
    A single link of a header chain: its own identity, the identity of the
    block it builds on, and the proof-of-work weight it contributes.
    """

    identity: Hash32
    parent_identity: Hash32
    weight: Weight

    @property
    @abstractmethod
    def hex_identity(self) -> str:
        """
        Return the identity as a hex string, in display (reversed) byte order.
        """
        ...

    # We can remove this API and inherit from rlp.Serializable when it becomes typesafe
    @abstractmethod
    def as_dict(self) -> Dict[Hashable, Any]:
        """
        Return a dictionary representation of the block.
        """
        ...


class BlockStoreAPI(ABC):
    """
    A mapping from block identity to block. The single source of truth for
    whether a hash is known and what its fields are.
    """

    @abstractmethod
    def insert(self, block: BlockAPI) -> None:
        """
        Add ``block`` under its identity, replacing any block already stored
        under the same identity.

        Raise ``StoreFinalized`` if the store ordering has already been fixed.
        """
        ...

    @abstractmethod
    def lookup(self, identity: Hash32) -> Optional[BlockAPI]:
        """
        Return the block stored under ``identity``, or ``None`` if it is absent.
        """
        ...

    @abstractmethod
    def get_block_by_identity(self, identity: Hash32) -> BlockAPI:
        """
        Return the block stored under ``identity``.

        Raise ``BlockNotFound`` if it is not present in the store.
        """
        ...

    @abstractmethod
    def all(self) -> Tuple[BlockAPI, ...]:
        """
        Return every stored block, ordered ascending by identity.
        """
        ...

    @abstractmethod
    def finalize(self) -> None:
        """
        Fix the iteration order of the store and make it read-only.
        """
        ...

    @property
    @abstractmethod
    def is_finalized(self) -> bool:
        ...

    @abstractmethod
    def __contains__(self, identity: object) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...


class WorkMemoAPI(ABC):
    """
    A cache of cumulative work keyed by block identity. Values are only ever
    inserted, never replaced.
    """

    @abstractmethod
    def get(self, identity: Hash32) -> Optional[Work]:
        """
        Return the cumulative work recorded for ``identity``, or ``None``.
        """
        ...

    @abstractmethod
    def record(self, identity: Hash32, work: Work) -> None:
        """
        Remember ``work`` as the cumulative work for ``identity``.

        Raise ``ValidationError`` if a different value is already recorded.
        """
        ...

    @abstractmethod
    def __contains__(self, identity: object) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...


class ChainAPI(Sequence[BlockAPI]):
    """
    An ordered sequence of blocks, root first and tip last, where every block
    builds on the one before it.
    """

    blocks: Tuple[BlockAPI, ...]

    @property
    @abstractmethod
    def genesis(self) -> BlockAPI:
        """
        Return the first block of the chain, whose parent is unknown.
        """
        ...

    @property
    @abstractmethod
    def tip(self) -> BlockAPI:
        """
        Return the last block of the chain.
        """
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the tip, where the genesis has height zero.
        """
        ...

    @property
    @abstractmethod
    def total_work(self) -> Work:
        """
        Return the sum of the weights of every block on the chain.
        """
        ...

    @abstractmethod
    def heights(self) -> HeightRecords:
        """
        Return ``(identity, height)`` pairs for every block, root first.
        """
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[BlockAPI]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...


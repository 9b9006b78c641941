from eth_typing import (
    Hash32,
)


class BestChainError(Exception):
    """
    Base class for all bestchain errors.
    """


class BlockNotFound(BestChainError):
    """
    Raised when a block with the given identity does not exist in the store.
    """


class NoCandidateBlocks(BestChainError):
    """
    Raised when chain selection is attempted against an empty store.
    """


class CyclicAncestry(BestChainError):
    """
    Raised when following parent links revisits a block that was already
    walked, meaning the block is its own transitive ancestor.
    """

    @property
    def identity(self) -> Hash32:
        return self.args[0]


class StoreFinalized(BestChainError):
    """
    Raised when inserting into a store whose ordering has already been fixed.
    """

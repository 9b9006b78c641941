from typing import (
    Iterator,
    Sequence,
    Tuple,
    Union,
    overload,
)

from cached_property import (
    cached_property,
)
from eth_utils import (
    ValidationError,
    encode_hex,
    to_tuple,
)
from eth_utils.toolz import (
    sliding_window,
)

from bestchain.abc import (
    BlockAPI,
    ChainAPI,
)
from bestchain.constants import (
    GENESIS_HEIGHT,
)
from bestchain.typing import (
    Height,
    HeightRecords,
    Work,
)


class Chain(ChainAPI):
    """
    A contiguous run of blocks from a root to a tip.
    """

    def __init__(self, blocks: Sequence[BlockAPI]) -> None:
        if not blocks:
            raise ValidationError("A chain must contain at least one block")

        for parent, child in sliding_window(2, blocks):
            if child.parent_identity != parent.identity:
                raise ValidationError(
                    f"Non-contiguous chain. Expected {encode_hex(child.identity)} "
                    f"to have {encode_hex(parent.identity)} as parent "
                    f"but was {encode_hex(child.parent_identity)}"
                )

        self.blocks = tuple(blocks)

    @property
    def genesis(self) -> BlockAPI:
        return self.blocks[0]

    @property
    def tip(self) -> BlockAPI:
        return self.blocks[-1]

    @property
    def height(self) -> int:
        return len(self.blocks) - 1

    @cached_property
    def total_work(self) -> Work:
        return sum(block.weight for block in self.blocks)

    @to_tuple
    def heights(self) -> HeightRecords:
        for height, block in enumerate(self.blocks, start=GENESIS_HEIGHT):
            yield block.identity, Height(height)

    def __iter__(self) -> Iterator[BlockAPI]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @overload
    def __getitem__(self, index: int) -> BlockAPI:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[BlockAPI, ...]:
        ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[BlockAPI, Tuple[BlockAPI, ...]]:
        return self.blocks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self.blocks == other.blocks

    def __repr__(self) -> str:
        return (
            f"<Chain height={self.height} work={self.total_work} "
            f"tip={self.tip.hex_identity}>"
        )

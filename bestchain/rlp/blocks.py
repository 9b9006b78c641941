from eth_typing import (
    Hash32,
)
from eth_utils import (
    encode_hex,
    humanize_hash,
)
import rlp

from bestchain.abc import (
    BlockAPI,
)
from bestchain.typing import (
    Weight,
)
from bestchain.validation import (
    validate_uint32,
    validate_word,
)

from .sedes import (
    hash32,
    uint32,
)


class Block(rlp.Serializable, BlockAPI):
    fields = [
        ("identity", hash32),
        ("parent_identity", hash32),
        ("weight", uint32),
    ]

    def __init__(
        self,
        identity: Hash32,
        parent_identity: Hash32,
        weight: Weight,
    ) -> None:
        validate_word(identity, title="Block Identity")
        validate_word(parent_identity, title="Parent Identity")
        validate_uint32(weight, title="Block Weight")

        super().__init__(
            identity=identity,
            parent_identity=parent_identity,
            weight=weight,
        )

    def __str__(self) -> str:
        return f"<Block {humanize_hash(self.identity)} weight={self.weight}>"

    @property
    def hex_identity(self) -> str:
        return encode_hex(self.identity[::-1])

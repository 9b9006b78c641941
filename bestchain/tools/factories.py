import secrets
from typing import (
    Iterable,
)

import factory

from eth_typing import (
    Hash32,
)
from eth_utils import (
    to_tuple,
)

from bestchain.abc import (
    BlockAPI,
)
from bestchain.constants import (
    HASH_SIZE,
    HEADER_SIZE,
    PARENT_IDENTITY_OFFSET,
    WEIGHT_OFFSET,
    WEIGHT_SIZE,
    ZERO_HASH32,
)
from bestchain.rlp.blocks import (
    Block,
)


def _mk_identity() -> Hash32:
    return Hash32(secrets.token_bytes(HASH_SIZE))


class BlockFactory(factory.Factory):
    class Meta:
        model = Block

    identity = factory.LazyFunction(_mk_identity)
    parent_identity = ZERO_HASH32
    weight = 1


@to_tuple
def mk_block_chain(
    base_block: BlockAPI, length: int, weight: int = 1
) -> Iterable[BlockAPI]:
    """
    Build ``length`` blocks, each the child of the previous one, on top of
    ``base_block`` (which is not included).
    """
    previous_block = base_block
    for _ in range(length):
        next_block = BlockFactory(parent_identity=previous_block.identity, weight=weight)
        yield next_block
        previous_block = next_block


def mk_header_record(
    parent_identity: Hash32 = ZERO_HASH32, weight: int = 0, nonce: int = 0
) -> bytes:
    """
    Build a raw header record. ``nonce`` fills the bytes the decoder ignores,
    so distinct nonces give distinct identities.
    """
    record = bytearray(HEADER_SIZE)
    record[PARENT_IDENTITY_OFFSET:PARENT_IDENTITY_OFFSET + HASH_SIZE] = parent_identity
    record[WEIGHT_OFFSET:WEIGHT_OFFSET + WEIGHT_SIZE] = weight.to_bytes(
        WEIGHT_SIZE, "little"
    )
    record[HEADER_SIZE - 4:] = nonce.to_bytes(4, "little")
    return bytes(record)

"""
Binary boundary of the batch tool.

Input is a stream of fixed-size 80-byte block headers. Output is one 36-byte
record per block of the selected chain: the block identity followed by its
little-endian height, sorted by identity.
"""
import hashlib
from typing import (
    BinaryIO,
    Iterable,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    get_extended_debug_logger,
    to_dict,
    to_tuple,
)

from bestchain.abc import (
    BlockAPI,
    ChainAPI,
)
from bestchain.constants import (
    HASH_SIZE,
    HEADER_SIZE,
    HEIGHT_RECORD_SIZE,
    HEIGHT_SIZE,
    PARENT_IDENTITY_OFFSET,
    WEIGHT_OFFSET,
    WEIGHT_SIZE,
)
from bestchain.rlp.blocks import (
    Block,
)
from bestchain.typing import (
    Height,
    HeightRecords,
    Weight,
)
from bestchain.validation import (
    validate_is_bytes,
    validate_length,
    validate_multiple_of,
    validate_uint32,
    validate_word,
)

logger = get_extended_debug_logger("bestchain.codec")


def hash_header(record: bytes) -> Hash32:
    """
    Double SHA-256 of a raw header, in digest byte order.
    """
    return Hash32(hashlib.sha256(hashlib.sha256(record).digest()).digest())


def decode_header(record: bytes) -> BlockAPI:
    validate_is_bytes(record, title="Header Record")
    validate_length(record, HEADER_SIZE, title="Header Record")

    parent_identity = record[PARENT_IDENTITY_OFFSET:PARENT_IDENTITY_OFFSET + HASH_SIZE]
    weight = int.from_bytes(record[WEIGHT_OFFSET:WEIGHT_OFFSET + WEIGHT_SIZE], "little")

    return Block(
        identity=hash_header(record),
        parent_identity=Hash32(parent_identity),
        weight=Weight(weight),
    )


def iter_header_records(stream: BinaryIO) -> Iterable[bytes]:
    """
    Yield raw header records until the stream is exhausted. A short record
    at the end of the stream is dropped.
    """
    while True:
        record = stream.read(HEADER_SIZE)
        if len(record) < HEADER_SIZE:
            if record:
                logger.debug(
                    "Dropping %d trailing bytes of a truncated header", len(record)
                )
            return
        yield record


@to_tuple
def read_headers(stream: BinaryIO) -> Iterable[BlockAPI]:
    for record in iter_header_records(stream):
        yield decode_header(record)


def encode_height_record(identity: Hash32, height: Height) -> bytes:
    validate_word(identity, title="Block Identity")
    validate_uint32(height, title="Block Height")
    return identity + height.to_bytes(HEIGHT_SIZE, "little")


def encode_chain(chain: ChainAPI) -> bytes:
    return b"".join(
        encode_height_record(identity, height)
        for identity, height in sorted(chain.heights())
    )


@to_dict
def decode_height_records(data: bytes) -> HeightRecords:
    validate_is_bytes(data, title="Height Records")
    validate_multiple_of(len(data), HEIGHT_RECORD_SIZE, title="Height Records length")

    for offset in range(0, len(data), HEIGHT_RECORD_SIZE):
        identity = data[offset:offset + HASH_SIZE]
        height = int.from_bytes(
            data[offset + HASH_SIZE:offset + HEIGHT_RECORD_SIZE], "little"
        )
        yield Hash32(identity), Height(height)

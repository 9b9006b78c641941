import sys
from typing import (
    BinaryIO,
)

from eth_utils import (
    get_extended_debug_logger,
)

from bestchain._utils.logging import (
    setup_stderr_logging,
)
from bestchain.abc import (
    ChainAPI,
)
from bestchain.chain import (
    find_tips,
    select_best,
)
from bestchain.codec import (
    encode_chain,
    read_headers,
)
from bestchain.db import (
    BlockStore,
)
from bestchain.exceptions import (
    BestChainError,
)

logger = get_extended_debug_logger("bestchain.cli")


def run(instream: BinaryIO, outstream: BinaryIO) -> ChainAPI:
    """
    Read every header from ``instream``, select the chain with the most work
    and write its height records to ``outstream``.
    """
    store = BlockStore()
    for block in read_headers(instream):
        store.insert(block)
    logger.info("Read %d headers", len(store))

    store.finalize()
    logger.info("Sorted %d headers", len(store))

    logger.info("Found %d chain tips", len(find_tips(store)))

    chain = select_best(store)
    logger.info("Best chain")
    logger.info("- Height: %d", chain.height)
    logger.info("- Genesis: %s", chain.genesis.hex_identity)
    logger.info("- Tip: %s", chain.tip.hex_identity)

    outstream.write(encode_chain(chain))
    outstream.flush()
    return chain


def main() -> None:
    setup_stderr_logging()
    try:
        run(sys.stdin.buffer, sys.stdout.buffer)
    except BestChainError as err:
        logger.error("Could not select a best chain: %s", err)
        sys.exit(1)

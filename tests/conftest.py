from eth_utils import (
    setup_DEBUG2_logging,
)
import pytest

from bestchain.db import (
    BlockStore,
    WorkMemo,
)
from bestchain.tools.factories import (
    BlockFactory,
    mk_block_chain,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


@pytest.fixture
def store():
    return BlockStore()


@pytest.fixture
def memo():
    return WorkMemo()


@pytest.fixture
def genesis():
    return BlockFactory(weight=1)


@pytest.fixture
def linear_store(genesis):
    blocks = (genesis,) + mk_block_chain(genesis, length=9)
    return BlockStore.from_blocks(blocks)


@pytest.fixture
def forked_store():
    # A(10) -> B(5)
    #       \-> C(20)
    a = BlockFactory(weight=10)
    b = BlockFactory(parent_identity=a.identity, weight=5)
    c = BlockFactory(parent_identity=a.identity, weight=20)
    return BlockStore.from_blocks((a, b, c)), (a, b, c)

import hashlib

from hypothesis import (
    given,
    settings,
    strategies as st,
)
import pytest

from bestchain.chain import (
    Chain,
    find_tips,
    iter_ancestry,
    select_best,
    total_work,
)
from bestchain.constants import (
    UINT_32_MAX,
    ZERO_HASH32,
)
from bestchain.db import (
    BlockStore,
    WorkMemo,
)
from bestchain.exceptions import (
    CyclicAncestry,
    NoCandidateBlocks,
)
from bestchain.rlp.blocks import (
    Block,
)
from bestchain.tools.factories import (
    BlockFactory,
    mk_block_chain,
)


def _identity(value):
    return hashlib.sha256(value.to_bytes(4, "big")).digest()


def _naive_work(store, block):
    work = 0
    for ancestor in iter_ancestry(store, block):
        work += ancestor.weight
    return work


def test_select_best_empty_store_fails(store):
    store.finalize()
    with pytest.raises(NoCandidateBlocks):
        select_best(store)


def test_select_best_fork_picks_heavier_branch(forked_store):
    store, (a, b, c) = forked_store

    chain = select_best(store)

    assert [block.identity for block in chain] == [a.identity, c.identity]
    assert chain.total_work == 30
    assert chain.height == 1
    assert len(find_tips(store)) == 2


def test_select_best_linear_chain():
    a = BlockFactory(weight=1)
    b = BlockFactory(parent_identity=a.identity, weight=1)
    c = BlockFactory(parent_identity=b.identity, weight=1)
    store = BlockStore.from_blocks((c, a, b))

    chain = select_best(store)

    assert list(chain) == [a, b, c]
    assert chain.total_work == 3
    assert chain.heights() == ((a.identity, 0), (b.identity, 1), (c.identity, 2))
    assert len(find_tips(store)) == 1


def test_select_best_long_linear_chain(linear_store):
    chain = select_best(linear_store)

    assert len(chain) == len(linear_store)
    assert chain.genesis.parent_identity not in linear_store


def test_select_best_heavy_orphan_wins_as_single_block_chain():
    genesis = BlockFactory(weight=10)
    descendants = mk_block_chain(genesis, length=5, weight=10)
    orphan = BlockFactory(parent_identity=b"\x42" * 32, weight=UINT_32_MAX)
    store = BlockStore.from_blocks((genesis, orphan) + descendants)

    chain = select_best(store)

    assert list(chain) == [orphan]
    assert chain.genesis == chain.tip == orphan
    assert chain.height == 0


def test_select_best_tie_goes_to_lowest_identity():
    root = Block(_identity(0), ZERO_HASH32, 1)
    low = Block(b"\x01" * 32, root.identity, 5)
    high = Block(b"\xff" * 32, root.identity, 5)
    store = BlockStore.from_blocks((root, high, low))

    chain = select_best(store)

    assert chain.tip == low


def test_select_best_all_zero_weights_still_selects():
    blocks = [BlockFactory(weight=0) for _ in range(3)]
    store = BlockStore.from_blocks(blocks)

    chain = select_best(store)

    assert chain.total_work == 0
    assert chain.tip == store.all()[0]


def test_select_best_memoizes_every_block(forked_store):
    store, blocks = forked_store
    memo = WorkMemo()

    select_best(store, memo)

    assert len(memo) == len(blocks)
    for block in blocks:
        assert memo.get(block.identity) == _naive_work(store, block)


def test_select_best_cycle_raises():
    a = BlockFactory(identity=b"\x01" * 32, parent_identity=b"\x02" * 32)
    b = BlockFactory(identity=b"\x02" * 32, parent_identity=b"\x01" * 32)
    store = BlockStore.from_blocks((a, b))

    with pytest.raises(CyclicAncestry):
        select_best(store)


def test_iter_ancestry_walks_to_root(linear_store):
    chain = select_best(linear_store)

    ancestry = iter_ancestry(linear_store, chain.tip)

    assert ancestry == tuple(reversed(chain.blocks))


def test_iter_ancestry_detects_cycle():
    looped = BlockFactory(identity=b"\x07" * 32, parent_identity=b"\x07" * 32)
    store = BlockStore.from_blocks((looped,))

    with pytest.raises(CyclicAncestry):
        iter_ancestry(store, looped)


# Each element describes one block: the index of an earlier block to build on
# (taken modulo the number of earlier blocks) or None for a root, and a weight.
forest_strategy = st.lists(
    st.tuples(
        st.one_of(st.none(), st.integers(min_value=0)),
        st.integers(min_value=0, max_value=UINT_32_MAX),
    ),
    min_size=1,
    max_size=40,
)


def _mk_forest(layout):
    blocks = []
    for index, (parent_choice, weight) in enumerate(layout):
        if parent_choice is None or not blocks:
            parent_identity = ZERO_HASH32
        else:
            parent_identity = blocks[parent_choice % len(blocks)].identity
        blocks.append(Block(_identity(index), parent_identity, weight))
    return BlockStore.from_blocks(blocks)


@given(layout=forest_strategy)
@settings(max_examples=200)
def test_select_best_has_most_work_of_any_path(layout):
    store = _mk_forest(layout)

    chain = select_best(store)

    assert chain.total_work == sum(block.weight for block in chain)
    assert chain.total_work == max(_naive_work(store, block) for block in store.all())


@given(layout=forest_strategy)
def test_select_best_chain_is_contiguous(layout):
    store = _mk_forest(layout)

    chain = select_best(store)

    assert chain.genesis.parent_identity not in store
    for parent, child in zip(chain, chain[1:]):
        assert child.parent_identity == parent.identity
    # re-validates contiguity
    assert Chain(chain.blocks) == chain


@given(layout=forest_strategy)
def test_total_work_matches_with_and_without_memo(layout):
    store = _mk_forest(layout)
    warm_memo = WorkMemo()
    select_best(store, warm_memo)

    for block in store.all():
        assert total_work(WorkMemo(), store, block) == warm_memo.get(block.identity)
        assert total_work(warm_memo, store, block) == warm_memo.get(block.identity)


@given(layout=forest_strategy)
def test_tip_count_matches_childless_blocks(layout):
    store = _mk_forest(layout)
    parents = {block.parent_identity for block in store.all()}

    tips = find_tips(store)

    assert len(tips) == len([b for b in store.all() if b.identity not in parents])

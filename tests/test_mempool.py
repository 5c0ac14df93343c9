from minibitcoin.mempool import Mempool
from minibitcoin.transaction import Transaction, TxIn, TxOut


def _tx(n):
    return Transaction([TxIn(f"prev{n}", 0)], [TxOut("bob", float(n))])


def test_empty_pool_selects_nothing():
    assert Mempool().select_transactions(3) == []


def test_add_and_select_in_order():
    pool = Mempool()
    txs = [_tx(i) for i in range(1, 4)]
    for tx in txs:
        pool.add_transaction(tx)
    assert [t.id for t in pool.select_transactions(10)] == [t.id for t in txs]


def test_select_respects_max_count():
    pool = Mempool()
    for i in range(1, 6):
        pool.add_transaction(_tx(i))
    assert len(pool.select_transactions(2)) == 2


def test_select_zero_still_returns_one():
    pool = Mempool()
    pool.add_transaction(_tx(1))
    assert len(pool.select_transactions(0)) == 1


def test_duplicate_id_keeps_first():
    pool = Mempool()
    first = _tx(1)
    first.inputs[0].signature = "first"
    second = _tx(1)
    second.inputs[0].signature = "second"
    pool.add_transaction(first)
    pool.add_transaction(second)
    selected = pool.select_transactions(5)
    assert len(selected) == 1
    assert selected[0].inputs[0].signature == "first"


def test_remove_transaction():
    pool = Mempool()
    tx = _tx(1)
    pool.add_transaction(tx)
    assert tx.id in pool
    pool.remove_transaction(tx.id)
    assert tx.id not in pool
    assert len(pool) == 0


def test_remove_missing_leaves_pool_unchanged():
    pool = Mempool()
    pool.add_transaction(_tx(1))
    pool.remove_transaction("missing")
    assert len(pool) == 1
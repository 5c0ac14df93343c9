from minibitcoin.hashing import sha256
from minibitcoin.transaction import Transaction, TxIn, TxOut


def test_coinbase_id_worked_example():
    tx = Transaction([], [TxOut("alice", 10.0)])
    assert tx.id == sha256("alice10")


def test_spending_tx_id_worked_example():
    tx = Transaction([TxIn("abc", 0)], [TxOut("bob", 5.0), TxOut("alice", 4.7)])
    assert tx.id == sha256("abc0bob5alice4.7")


def test_id_matches_calculate_hash():
    tx = Transaction([TxIn("prev", 1)], [TxOut("bob", 2.5)])
    assert tx.id == tx.calculate_hash()


def test_signature_does_not_change_hash():
    tx = Transaction([TxIn("prev", 0)], [TxOut("bob", 1.0)])
    before = tx.calculate_hash()
    tx.inputs[0].signature = "3045"
    tx.inputs[0].public_key = "04ab"
    assert tx.calculate_hash() == before
    assert tx.id == before


def test_different_amounts_give_different_ids():
    a = Transaction([], [TxOut("bob", 5.0)])
    b = Transaction([], [TxOut("bob", 6.0)])
    assert a.id != b.id


def test_different_output_index_gives_different_ids():
    a = Transaction([TxIn("prev", 0)], [TxOut("bob", 5.0)])
    b = Transaction([TxIn("prev", 1)], [TxOut("bob", 5.0)])
    assert a.id != b.id


def test_default_txin_fields_empty():
    tx_in = TxIn("prev", 3)
    assert (tx_in.signature, tx_in.public_key) == ("", "")


def test_is_coinbase():
    assert Transaction([], [TxOut("a", 1.0)]).is_coinbase is True
    assert Transaction([TxIn("p", 0)], [TxOut("a", 1.0)]).is_coinbase is False


def test_inputs_are_copied_into_list():
    inputs = (TxIn("p", 0),)
    tx = Transaction(inputs, [])
    assert tx.inputs == [TxIn("p", 0)]
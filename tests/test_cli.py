import pytest

from minibitcoin.cli import BLOCK_REWARD, calculate_transaction_fee, main
from minibitcoin.transaction import Transaction, TxIn, TxOut
from minibitcoin.utxo import UTXOManager


def test_fee_is_inputs_minus_outputs():
    utxos = UTXOManager()
    funding = Transaction([], [TxOut("alice", 10.0), TxOut("alice", 2.0)])
    utxos.add_transaction(funding)
    tx = Transaction(
        [TxIn(funding.id, 0), TxIn(funding.id, 1)],
        [TxOut("bob", 8.0), TxOut("alice", 3.0)],
    )
    assert calculate_transaction_fee(tx, utxos) == pytest.approx(1.0)


def test_fee_ignores_missing_inputs():
    utxos = UTXOManager()
    tx = Transaction([TxIn("unknown", 0)], [TxOut("bob", 2.5)])
    assert calculate_transaction_fee(tx, utxos) == pytest.approx(-2.5)


def test_fee_of_coinbase_is_negative_output():
    tx = Transaction([], [TxOut("miner", BLOCK_REWARD)])
    assert calculate_transaction_fee(tx, UTXOManager()) == -BLOCK_REWARD


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Transaction validated and added to mempool!" in out
    assert "=== Blockchain ===" in out
    assert out.count("Index: ") == 2
    assert "Alice: 4.7 BTC" in out
    assert "Bob:   5 BTC" in out
    assert "Miner: 6.55 BTC" in out


def test_main_mined_hashes_meet_difficulty(capsys):
    main([])
    out = capsys.readouterr().out
    hashes = [line[len("Hash: "):] for line in out.splitlines() if line.startswith("Hash: ")]
    assert len(hashes) == 2
    assert all(h.startswith("000") for h in hashes)


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
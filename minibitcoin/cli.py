"""Command-line demonstration: a payment from Alice to Bob mined into a block."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .block import Block
from .blockchain import Blockchain
from .crypto import generate_key_pair, sign_message
from .mempool import Mempool
from .transaction import Transaction, TxIn, TxOut
from .utxo import UTXOManager

BLOCK_REWARD = 6.25
BLOCK_INTERVAL_MINUTES = 10
DIFFICULTY_ADJUSTMENT_INTERVAL = 2016
EXPECTED_TIME = BLOCK_INTERVAL_MINUTES * DIFFICULTY_ADJUSTMENT_INTERVAL * 60
MINING_DIFFICULTY = 3


def calculate_transaction_fee(tx: Transaction, utxos: UTXOManager) -> float:
    """Sum of the unspent inputs of ``tx`` minus the sum of its outputs.

    Inputs whose outputs are not unspent contribute nothing.
    """
    input_sum = 0.0
    for tx_in in tx.inputs:
        utxo = utxos.get_utxo(tx_in.prev_tx_id, tx_in.output_index)
        if utxo is not None:
            input_sum += utxo.amount
    output_sum = sum((out.amount for out in tx.outputs), 0.0)
    return input_sum - output_sum


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print the chain and final balances."""
    parser = argparse.ArgumentParser(
        prog="minibitcoin",
        description="Mine a genesis block, pay Bob from Alice and mine the payment.",
    )
    parser.parse_args(argv)

    utxos = UTXOManager()
    mempool = Mempool()
    blockchain = Blockchain()

    alice_priv, alice_pub = generate_key_pair()
    print(f"Alice Private Key: {alice_priv}")
    print(f"Alice Public Key:  {alice_pub}")

    _, bob_pub = generate_key_pair()
    print(f"Bob Public Key:  {bob_pub}")

    _, miner_pub = generate_key_pair()

    genesis_coinbase = Transaction([], [TxOut(alice_pub, 10.0)])
    genesis = Block(0, [genesis_coinbase], "0")
    genesis.mine_block(MINING_DIFFICULTY)
    blockchain.add_block(genesis, utxos)
    utxos.add_transaction(genesis_coinbase)

    tx = Transaction(
        [TxIn(genesis_coinbase.id, 0, "", "")],
        [TxOut(bob_pub, 5.0), TxOut(alice_pub, 4.7)],
    )
    tx.inputs[0].signature = sign_message(alice_priv, tx.calculate_hash())
    tx.inputs[0].public_key = alice_pub

    if utxos.validate_transaction(tx):
        mempool.add_transaction(tx)
        print("\nTransaction validated and added to mempool!")
    else:
        print("\n[!] Transaction validation failed!")

    block_txs = mempool.select_transactions(1)
    total_fees = sum((calculate_transaction_fee(t, utxos) for t in block_txs), 0.0)

    coinbase = Transaction([], [TxOut(miner_pub, BLOCK_REWARD + total_fees)])
    full_block_txs = [coinbase, *block_txs]
    new_block = Block(1, full_block_txs, blockchain.latest_block().calculate_hash())
    new_block.mine_block(MINING_DIFFICULTY)

    if blockchain.add_block(new_block, utxos):
        for block_tx in full_block_txs:
            utxos.add_transaction(block_tx)
            mempool.remove_transaction(block_tx.id)
    else:
        print("[!] Block rejected and not added to blockchain.", file=sys.stderr)

    print("\n=== Blockchain ===")
    blockchain.print()

    print("\n=== Final Balances ===")
    print(f"Alice: {utxos.get_balance(alice_pub):g} BTC")
    print(f"Bob:   {utxos.get_balance(bob_pub):g} BTC")
    print(f"Miner: {utxos.get_balance(miner_pub):g} BTC")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
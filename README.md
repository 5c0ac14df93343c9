# minibitcoin

A small, self-contained blockchain for learning how Bitcoin-style ledgers
fit together. Everything lives in memory and runs in one process.

## What is in the package

- `minibitcoin.hashing.sha256(data)` – lowercase hex SHA-256 of a string
  (encoded as UTF-8) or of bytes.
- `minibitcoin.crypto` – ECDSA on secp256k1 with hex strings throughout:
  - `generate_key_pair()` returns `(private_key_hex, public_key_hex)`; the
    public key is an uncompressed SEC1 point.
  - `sign_message(private_key_hex, message_hash)` signs a hex-encoded hash and
    returns the DER signature as hex. It raises `CryptoError` for a bad key,
    non-hex input or an unsupported hash length.
  - `verify_signature(public_key_hex, message_hash, signature_hex)` returns
    `True` or `False`; malformed input gives `False`.
- `minibitcoin.transaction` – `TxIn` (previous transaction id, output index,
  signature, public key), `TxOut` (recipient, amount) and `Transaction`.
  A transaction's `id` is set from `calculate_hash()` when it is created. The
  hash covers the spent outputs and the new outputs, not the signatures, so
  signing an input leaves the id unchanged. `is_coinbase` is true for a
  transaction with no inputs.
- `minibitcoin.utxo.UTXOManager` – the set of unspent outputs, keyed by
  `"txid:index"`: `add_transaction`, `is_unspent`, `consume_input`,
  `get_balance`, `get_utxo` (returns `None` when spent or unknown),
  `validate_transaction` and `copy`. A transaction is valid when every input
  spends an existing output, the input's public key is that output's
  recipient, and the signature verifies against the transaction hash.
- `minibitcoin.mempool.Mempool` – pending transactions in insertion order:
  `add_transaction` (a repeated id is ignored), `remove_transaction` and
  `select_transactions(max_count)`, which returns at least one transaction
  whenever the pool is not empty.
- `minibitcoin.block.Block` – index, transactions, previous hash, timestamp
  (the current time unless given) and nonce. `mine_block(difficulty)` raises
  the nonce until the hash starts with that many zeros.
  `validate_transactions(utxos)` checks the transactions in order against a
  copy of the UTXO set, so a later transaction may spend an earlier one's
  output but an output spent twice in one block is rejected. `str(block)`
  gives a readable summary.
- `minibitcoin.blockchain.Blockchain` – `add_block(block, utxos)` returns
  `True` and appends the block, or `False` and leaves the chain alone. Every
  block after the first must name the previous block's hash and have a hash
  starting with three zeros; every block must pass `validate_transactions`.
  `latest_block()` raises `IndexError` on an empty chain, `is_valid_chain()`
  rechecks the links and difficulty, and `print(file=None)` writes each block
  to standard output or to `file`.
- `minibitcoin.cli` – the demo command and `calculate_transaction_fee(tx,
  utxos)`: the sum of the inputs that are still unspent minus the sum of the
  outputs.

Rejections are reported through the standard `logging` module as warnings.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
minibitcoin
```

The demo creates keys for Alice, Bob and a miner and prints Alice's keys and
Bob's public key. It mines a genesis block that pays Alice 10 BTC, has Alice
send 5 BTC to Bob with 4.7 BTC change (leaving a 0.3 BTC fee), validates that
payment into the mempool, and lets the miner pack it into a new block whose
coinbase pays the 6.25 BTC reward plus fees. It then prints the chain and the
final balances of Alice, Bob and the miner. It takes no options besides
`--help`.

## Using the library

```python
from minibitcoin.block import Block
from minibitcoin.blockchain import Blockchain
from minibitcoin.crypto import generate_key_pair, sign_message
from minibitcoin.mempool import Mempool
from minibitcoin.transaction import Transaction, TxIn, TxOut
from minibitcoin.utxo import UTXOManager

utxos = UTXOManager()
chain = Blockchain()
mempool = Mempool()

alice_priv, alice_pub = generate_key_pair()
bob_priv, bob_pub = generate_key_pair()

coinbase = Transaction([], [TxOut(alice_pub, 10.0)])
genesis = Block(0, [coinbase], "0")
genesis.mine_block(3)
chain.add_block(genesis, utxos)
utxos.add_transaction(coinbase)

tx = Transaction([TxIn(coinbase.id, 0)], [TxOut(bob_pub, 5.0), TxOut(alice_pub, 4.7)])
tx.inputs[0].signature = sign_message(alice_priv, tx.calculate_hash())
tx.inputs[0].public_key = alice_pub

if utxos.validate_transaction(tx):
    mempool.add_transaction(tx)
```

Note that `Blockchain.add_block` does not update the UTXO set; call
`UTXOManager.add_transaction` for each transaction of an accepted block.

## What it does not do

- No storage: the chain, UTXO set and mempool exist only in memory.
- No networking or peers: blocks and transactions are passed in by code.
- No difficulty adjustment: the chain always requires three leading zeros.
- No check that outputs do not exceed inputs, and no limit on coinbase
  amounts.
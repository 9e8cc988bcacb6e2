# bscnode

This package provides building blocks for working with BNB Smart Chain (BSC):

- **Hardfork schedules** for BSC mainnet, the Chapel testnet and the QA network. A schedule says when each Ethereum and BSC hardfork activates, either at a block number or at a timestamp.
- **Chain specifications** for mainnet and testnet. They compute EIP-2124 fork ids, and `chain_value_parser` turns the chain names `bsc` and `bsc-testnet` into a specification.
- **Parlia head selection**. The higher block wins. When two blocks have the same height, the lower hash wins.
- **Transaction environments** (`TxEnv`, `BscTxEnv`). A `BscTxEnv` also records whether a transaction is a BSC system transaction.
- **The Tendermint secp256k1 signature-recover precompile** at address `0x69`, together with the precompile result and error types.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Hardfork schedules

```python
from bscnode.forks import EthereumHardfork
from bscnode.hardforks import (
    BscHardfork,
    bsc_mainnet_activation_block,
    bsc_mainnet_activation_timestamp,
    bsc_mainnet_hardforks,
)

bsc_mainnet_activation_block(BscHardfork.HERTZ)            # 31302048
bsc_mainnet_activation_timestamp(EthereumHardfork.CANCUN)  # 1718863500

forks = bsc_mainnet_hardforks()
forks.fork(BscHardfork.MAXWELL).active_at_timestamp(1751250600)  # True
```

### Per-chain lookups

The functions `activation_block(fork, chain_id)` and `activation_timestamp(fork, chain_id)` choose the table to search from the chain id. Chain id 56 selects mainnet and chain id 97 selects testnet. For any other chain id they return `None`.

### Schedule functions

`bsc_testnet_hardforks()` and `bsc_qa_hardforks()` return the schedules of the testnet and the QA network.

### Ordering and EVM specification

`BscHardfork` members compare in activation order. `BscHardfork.spec_id()` returns the EVM `SpecId` that a hardfork runs under.

### Fork conditions

A `ForkCondition` is created with `ForkCondition.block(n)`, `ForkCondition.timestamp(t)` or `ForkCondition.never()`. It answers the following queries:

- `active_at_block`
- `transitions_at_block`
- `active_at_timestamp`
- `transitions_at_timestamp`
- `active_at_head`

## Chain specifications

```python
from bscnode.chainspec import chain_value_parser, mainnet_head

spec = chain_value_parser("bsc")
spec.fork_id(mainnet_head())               # ForkId(hash=..., next=...)
spec.is_planck_active_at_block(27281024)   # True
spec.is_maxwell_active_at_timestamp(1751250600)
```

`BscChainSpec` gives access to the whole schedule:

- `fork(fork)` returns the condition of any single fork.
- `forks_iter()` iterates over the schedule.
- `latest_fork_id()` returns the fork id once every fork is active.
- `head()` returns a known head of the chain.

It inherits the `is_..._active_at_block`, `is_..._active_at_timestamp` and `is_on_...` checks from `bscnode.activation.BscHardforks`.

`chain_value_parser` raises `UnsupportedChainError` (a `ValueError`) when the name is not one of the supported chains. `BscChainSpecParser().parse(s)` does the same job, and the class lists the supported names in `SUPPORTED_CHAINS`.

## Parlia head selection

```python
from bscnode.consensus import ParliaConsensus

consensus = ParliaConsensus(provider)
head_hash, current_hash = consensus.canonical_head(block_hash, block_number)
```

The provider must supply two methods, `best_block_number()` and `block_hash(number)`.

If the provider has no hash for its current head, `canonical_head` raises `HeadHashNotFoundError`, which is a `ParliaConsensusError`.

## Transaction environments

```python
from bscnode.transaction import BscTxEnv, TxEnv

tx = BscTxEnv.from_base(TxEnv(gas_limit=10, gas_price=100, gas_priority_fee=5))
tx.gas_limit                 # 10
tx.is_system_transaction     # False
tx.effective_gas_price(50)   # 100 for a legacy transaction
```

## Tendermint secp256k1 recover precompile

```python
from bscnode.tm_secp256k1 import tm_secp256k1_signature_recover_run

output = tm_secp256k1_signature_recover_run(data, gas_limit=3_000)
output.gas_used  # 3000
output.data      # 20-byte Tendermint account id of the public key
```

The input has three parts, in this order:

1. a 33-byte compressed public key
2. a 64-byte compact signature
3. the 32-byte message hash

The function raises `PrecompileOutOfGas` when the gas limit is below 3000. It raises `PrecompileError` when the input, the key or the signature is invalid, or when the signature does not verify.

`bscnode.precompile.BscPrecompileError` describes the BSC-specific failures. Its `to_precompile_error()` method turns a failure into a `PrecompileError`. For example, a revert with `gas=4500` becomes `PrecompileError("Reverted(4500)")`.

## What this package does not do

This package is not a runnable node. It has:

- no command-line program
- no peer networking or bootnode lists
- no storage
- no block or transaction execution
- no genesis state; a chain specification holds only its genesis hash

Of the BSC precompiles, only the Tendermint secp256k1 recover precompile is included. The BLS, IAVL, Tendermint header, CometBFT light-block and double-sign precompiles are not.
# qsynthkit

A small toolkit with no dependencies. It builds quantum circuits from classical
descriptions: linear Boolean matrices, permutations and truth tables. It can
also shrink the CNOT parts of an existing circuit.

## Modules

**Circuits and devices**

- `qsynthkit.circuit`: `Circuit` is an ordered list of `Instruction`s over
  qubits and cbits. Each instruction has a `name`, its `qubits` (controls first,
  target last; both qubits are targets for `"swap"`) and its `cbits`. The
  circuit tracks which instruction came before each one on every wire
  (`predecessors`), and the last instruction on each wire (`outputs`). It also
  offers `append`, `shallow_duplicate`, `reversed` and a `global_phase`
  attribute.
- `qsynthkit.device`: `Device` is an undirected coupling graph. `Device.path(n)`
  builds a line of `n` qubits. `distance` gives the shortest-path length, which
  is `UNREACHABLE` when no path exists. `are_connected` tells whether two qubits
  are coupled.
- `qsynthkit.placement`: `Placement` is a partial one-to-one map between virtual
  and physical qubits. It supports `map_v_phy`, `swap_qubits`, `free_physical`
  and `unmapped_virtual`. `Mapping` keeps an initial and a current copy of a
  placement.

**Synthesis**

- `qsynthkit.linear_synth`: `linear_synth(matrix, section_size=2,
  best_effort=False, inverse=False)` turns an invertible matrix over GF(2) into
  a circuit of two-qubit `"x"` (CNOT) gates, using Patel–Markov–Hayes
  elimination. With `best_effort=True` a section size of 2 is used.
  `inverse=True` reverses the gate order. A non-square or singular matrix
  raises `ValueError`. `linear_synth_gates` returns the bare `(control, target)`
  pairs. `linear_synth_into` applies them to qubits of an existing circuit.
- `qsynthkit.transform_synth`: `transform_synth(perm)` turns a permutation of
  `2**n` values into a circuit of multi-controlled `"x"` gates, using the
  multidirectional transformation-based method. A length that is not a power of
  two, or a list that is not a permutation, raises `ValueError`.
  `transform_synth_gates` returns `(controls mask, targets mask)` pairs.
  `transform_synth_into` applies them to an existing circuit.
- `qsynthkit.pprm_synth`: `pprm_synth(truth_table, num_vars, phase_esop=False)`
  builds an oracle from the positive-polarity Reed–Muller expansion of a
  single-output function. Bit `x` of the integer `truth_table` is the value of
  the function on input `x`. By default the oracle flips an extra output qubit.
  With `phase_esop=True` it applies `"z"` gates instead, and a constant-one term
  adds π to `global_phase`. `pprm_cubes` lists the monomials as variable masks.

**Optimisation**

- `qsynthkit.linear_resynth`: `partition_into_slices` cuts a circuit into
  slices. Each slice holds a linear part (two-qubit `"x"` and `"parity"` gates)
  and the non-linear gates that follow it. `linear_resynth` re-synthesises each
  linear part with `linear_synth`. It keeps the new gates only when they number
  fewer than the original CNOTs.

## Installation

```
pip install qsynthkit
```

## Example

```python
from qsynthkit.linear_synth import linear_synth
from qsynthkit.transform_synth import transform_synth
from qsynthkit.pprm_synth import pprm_synth

matrix = [[1, 1, 0],
          [0, 1, 0],
          [1, 0, 1]]
circuit = linear_synth(matrix)
for inst in circuit:
    print(inst.name, inst.controls(), inst.target())

swap_bits = transform_synth([0, 2, 1, 3])
print(len(swap_bits), "gates for a 2-bit permutation")

and_oracle = pprm_synth(0b1000, 2)   # f(a, b) = a AND b
print([inst.qubits for inst in and_oracle])
```

## What it does not do

The package does not route circuits onto a device or insert SWAP or bridge
gates. It does not search for SWAP sequences between qubit configurations, and
it does not improve placements. `Device`, `Placement` and `Mapping` are provided
as data structures only. The package has no command-line interface, and it
cannot read or write circuit file formats.

## Running the tests

```
pip install -e ".[test]"
pytest
```
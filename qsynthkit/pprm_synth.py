"""Synthesis of oracles from the positive-polarity Reed-Muller expansion."""

from __future__ import annotations

import math
from collections.abc import Sequence

from qsynthkit.circuit import Circuit


def _validate(truth_table: int, num_vars: int) -> None:
    if num_vars < 0:
        raise ValueError("number of variables must not be negative")
    if not 0 <= truth_table < 1 << (1 << num_vars):
        raise ValueError("truth table does not fit the number of variables")


def pprm_cubes(truth_table: int, num_vars: int) -> list[int]:
    """Monomials of the PPRM expansion as variable masks, in increasing order.

    Bit x of `truth_table` is the function's value on input x.
    """
    _validate(truth_table, num_vars)
    size = 1 << num_vars
    coeffs = [(truth_table >> x) & 1 for x in range(size)]
    for var in range(num_vars):
        step = 1 << var
        for x in range(size):
            if x & step:
                coeffs[x] ^= coeffs[x ^ step]
    return [mask for mask, coeff in enumerate(coeffs) if coeff]


def pprm_synth_into(
    circuit: Circuit,
    qubits: Sequence[int],
    truth_table: int,
    num_vars: int,
    phase_esop: bool = False,
) -> None:
    """Apply the oracle for the function to `circuit`.

    Without `phase_esop` the last qubit is the output target; with it, the
    function is applied as a phase using Z gates.
    """
    expected = num_vars if phase_esop else num_vars + 1
    if len(qubits) != expected:
        raise ValueError(f"expected {expected} qubits, got {len(qubits)}")
    target = qubits[-1] if qubits else None
    for cube in pprm_cubes(truth_table, num_vars):
        qs = [qubits[v] for v in range(cube.bit_length()) if cube >> v & 1]
        if phase_esop:
            if qs:
                circuit.apply_operator("z", qs)
            else:
                # The constant-one cube only shifts the global phase.
                circuit.global_phase += math.pi
        else:
            circuit.apply_operator("x", [*qs, target])


def pprm_synth(truth_table: int, num_vars: int, phase_esop: bool = False) -> Circuit:
    """Build a fresh oracle circuit for the function."""
    _validate(truth_table, num_vars)
    circuit = Circuit()
    qubits = [circuit.create_qubit() for _ in range(num_vars)]
    if not phase_esop:
        qubits.append(circuit.create_qubit())
    pprm_synth_into(circuit, qubits, truth_table, num_vars, phase_esop)
    return circuit
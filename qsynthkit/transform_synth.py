"""Transformation-based synthesis of reversible permutations."""

from __future__ import annotations

from collections.abc import Sequence

from qsynthkit.circuit import Circuit

Gate = tuple[int, int]


def _popcount(value: int) -> int:
    return bin(value).count("1")


def _update_permutation(perm: list[int], controls: int, targets: int) -> None:
    for i, value in enumerate(perm):
        if value & controls == controls:
            perm[i] = value ^ targets


def _update_permutation_inv(perm: list[int], controls: int, targets: int) -> None:
    for i in range(len(perm)):
        if i & controls != controls:
            continue
        partner = i ^ targets
        if partner > i:
            perm[i], perm[partner] = perm[partner], perm[i]


def _validate(perm: Sequence[int]) -> list[int]:
    perm = list(perm)
    size = len(perm)
    if size == 0 or size & (size - 1):
        raise ValueError("permutation length must be a power of two")
    if sorted(perm) != list(range(size)):
        raise ValueError("not a permutation")
    return perm


def transform_synth_gates(perm: Sequence[int]) -> list[Gate]:
    """Return (controls mask, targets mask) Toffoli gates implementing `perm`."""
    perm = _validate(perm)
    gates: list[Gate] = []
    pos = 0
    for i in range(len(perm)):
        x_best = i
        x_best_cost = _popcount(i ^ perm[i])
        for j in range(i + 1, len(perm)):
            cost = _popcount(i ^ j) + _popcount(i ^ perm[j])
            if cost < x_best_cost:
                x_best, x_best_cost = j, cost

        y = perm[x_best]
        # map x_best |-> i on the input side
        p = ~x_best & i
        if p:
            _update_permutation_inv(perm, x_best, p)
            gates.insert(pos, (x_best, p))
            pos += 1
        q = x_best & ~i
        if q:
            _update_permutation_inv(perm, i, q)
            gates.insert(pos, (i, q))
            pos += 1

        # map y |-> i on the output side
        p = i & ~y
        if p:
            _update_permutation(perm, y, p)
            gates.insert(pos, (y, p))
        q = ~i & y
        if q:
            _update_permutation(perm, i, q)
            gates.insert(pos, (i, q))
    return gates


def _bits(mask: int) -> list[int]:
    return [bit for bit in range(mask.bit_length()) if mask >> bit & 1]


def transform_synth_into(circuit: Circuit, qubits: Sequence[int], perm: Sequence[int]) -> None:
    """Apply gates realising `perm` to `circuit`, bit i acting on qubits[i]."""
    for controls, targets in transform_synth_gates(perm):
        cs = [qubits[c] for c in _bits(controls)]
        for t in _bits(targets):
            circuit.apply_operator("x", [*cs, qubits[t]])


def transform_synth(perm: Sequence[int]) -> Circuit:
    """Build a fresh circuit realising `perm`."""
    perm = _validate(perm)
    circuit = Circuit()
    qubits = [circuit.create_qubit() for _ in range(len(perm).bit_length() - 1)]
    transform_synth_into(circuit, qubits, perm)
    return circuit
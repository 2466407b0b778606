"""Resynthesis of the linear (CNOT/parity) parts of a circuit."""

from __future__ import annotations

from typing import NamedTuple

from qsynthkit.circuit import Circuit, Instruction
from qsynthkit.linear_synth import linear_synth


class _Slice(NamedTuple):
    linear_gates: list[int]
    non_linear_gates: list[int]


def _is_linear(inst: Instruction) -> bool:
    if inst.name == "parity":
        return True
    return inst.name == "x" and len(inst.qubits) == 2 and not inst.cbits


def partition_into_slices(original: Circuit) -> list[_Slice]:
    """Split instruction indices into slices of linear and non-linear gates.

    Each slice's linear gates may be resynthesized together; its non-linear
    gates follow them.
    """
    level: list[int] = []
    slices: list[_Slice] = []
    for index, inst in enumerate(original):
        depth = max((level[p] for p in original.predecessors(index)), default=0)
        if depth == len(slices):
            slices.append(_Slice([], []))
        if _is_linear(inst):
            slices[depth].linear_gates.append(index)
            level.append(depth)
        else:
            slices[depth].non_linear_gates.append(index)
            level.append(depth + 1)
    return slices


def _copy(result: Circuit, inst: Instruction) -> None:
    result.apply_operator(inst.name, inst.qubits, inst.cbits)


def _resynth_slice(
    original: Circuit,
    piece: _Slice,
    result: Circuit,
    section_size: int,
    best_effort: bool,
    inverse: bool,
) -> None:
    if piece.linear_gates:
        gates = [original.instruction(i) for i in piece.linear_gates]
        to_id: dict[int, int] = {}
        for inst in gates:
            for q in inst.qubits:
                to_id.setdefault(q, len(to_id))
        size = len(to_id)
        matrix = [[int(r == c) for c in range(size)] for r in range(size)]
        num_cnot = 0
        for inst in gates:
            target = to_id[inst.target()]
            for control in inst.controls():
                row = matrix[to_id[control]]
                matrix[target] = [a ^ b for a, b in zip(matrix[target], row)]
                num_cnot += 1
        subcircuit = linear_synth(matrix, section_size, best_effort, inverse)
        if subcircuit.num_instructions() < num_cnot:
            result.append(subcircuit, list(to_id))
        else:
            for inst in gates:
                _copy(result, inst)
    for index in piece.non_linear_gates:
        _copy(result, original.instruction(index))


def linear_resynth(
    original: Circuit,
    section_size: int = 2,
    best_effort: bool = False,
    inverse: bool = False,
) -> Circuit:
    """Return a copy of `original` with its linear slices resynthesized."""
    result = original.shallow_duplicate()
    for piece in partition_into_slices(original):
        _resynth_slice(original, piece, result, section_size, best_effort, inverse)
    return result
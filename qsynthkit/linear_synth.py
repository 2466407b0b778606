"""Synthesis of CNOT circuits for invertible linear Boolean matrices."""

from __future__ import annotations

from collections.abc import Sequence

from qsynthkit.circuit import Circuit

Gate = tuple[int, int]
Matrix = list[list[int]]

# The best-effort search only ever keeps its initial candidate.
_BEST_EFFORT_SECTION_SIZE = 2


def _normalize(matrix: Sequence[Sequence[object]]) -> Matrix:
    rows = [[1 if value else 0 for value in row] for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _add_row(m: Matrix, src: int, dst: int) -> None:
    m[dst] = [a ^ b for a, b in zip(m[dst], m[src])]


def _pattern_elimination(m: Matrix, start: int, end: int, gates: list[Gate]) -> None:
    table = [0] * len(m)
    for row in range(start, len(m)):
        pattern = sum(bit << shift for shift, bit in enumerate(m[row][start:end]))
        if pattern == 0:
            continue
        try:
            pos = table.index(pattern, start)
        except ValueError:
            table[row] = pattern
            continue
        _add_row(m, pos, row)
        gates.append((pos, row))


def _gaussian_elimination(m: Matrix, start: int, end: int, gates: list[Gate]) -> None:
    for col in range(start, end):
        diagonal_one = m[col][col] == 1
        for row in range(col + 1, len(m)):
            if m[row][col] == 0:
                continue
            if not diagonal_one:
                diagonal_one = True
                _add_row(m, row, col)
                gates.append((row, col))
            _add_row(m, col, row)
            gates.append((col, row))


def _lower_cnot_synthesis(m: Matrix, section_size: int) -> list[Gate]:
    gates: list[Gate] = []
    num_cols = len(m[0]) if m else 0
    for start in range(0, num_cols, section_size):
        end = min(start + section_size, num_cols)
        _pattern_elimination(m, start, end, gates)
        _gaussian_elimination(m, start, end, gates)
    return gates


def _transpose(m: Matrix) -> Matrix:
    return [list(col) for col in zip(*m)]


def linear_synth_gates(
    matrix: Sequence[Sequence[object]],
    section_size: int = 2,
    best_effort: bool = False,
    inverse: bool = False,
) -> list[Gate]:
    """Return (control, target) CNOT pairs whose circuit implements `matrix`.

    Raises ValueError for a non-square or singular matrix.
    """
    work = _normalize(matrix)
    if best_effort:
        section_size = _BEST_EFFORT_SECTION_SIZE
    if section_size < 1:
        raise ValueError("section size must be positive")
    lower = _lower_cnot_synthesis(work, section_size)
    work = _transpose(work)
    upper = _lower_cnot_synthesis(work, section_size)
    n = len(work)
    if work != [[int(r == c) for c in range(n)] for r in range(n)]:
        raise ValueError("matrix is not invertible")
    gates = [(target, control) for control, target in upper]
    gates.extend(reversed(lower))
    if inverse:
        gates.reverse()
    return gates


def linear_synth_into(
    circuit: Circuit,
    qubits: Sequence[int],
    matrix: Sequence[Sequence[object]],
    section_size: int = 2,
    best_effort: bool = False,
    inverse: bool = False,
) -> None:
    """Apply the CNOTs for `matrix` to `circuit`, row i acting on qubits[i]."""
    for control, target in linear_synth_gates(matrix, section_size, best_effort, inverse):
        circuit.apply_operator("x", [qubits[control], qubits[target]])


def linear_synth(
    matrix: Sequence[Sequence[object]],
    section_size: int = 2,
    best_effort: bool = False,
    inverse: bool = False,
) -> Circuit:
    """Build a fresh circuit implementing `matrix`."""
    rows = _normalize(matrix)
    circuit = Circuit()
    qubits = [circuit.create_qubit() for _ in rows]
    linear_synth_into(circuit, qubits, rows, section_size, best_effort, inverse)
    return circuit
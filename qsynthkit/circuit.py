"""A minimal quantum circuit with a per-wire dependency graph."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

_MULTI_TARGET = frozenset({"swap"})


@dataclass(frozen=True)
class Instruction:
    """An operator applied to qubits (controls first, target last) and cbits."""

    name: str
    qubits: tuple[int, ...]
    cbits: tuple[int, ...] = ()

    def target(self) -> int:
        """The (first) target qubit."""
        if not self.qubits:
            raise ValueError(f"instruction {self.name!r} acts on no qubit")
        if self.name in _MULTI_TARGET:
            return self.qubits[0]
        return self.qubits[-1]

    def controls(self) -> tuple[int, ...]:
        if self.name in _MULTI_TARGET:
            return ()
        return self.qubits[:-1]


class Circuit:
    """An ordered list of instructions over named qubits and cbits."""

    def __init__(self) -> None:
        self._qubit_names: list[str] = []
        self._cbit_names: list[str] = []
        self._instructions: list[Instruction] = []
        self._predecessors: list[list[int]] = []
        self._last_on_wire: dict[tuple[str, int], int] = {}
        self.global_phase = 0.0

    def create_qubit(self, name: str | None = None) -> int:
        index = len(self._qubit_names)
        self._qubit_names.append(name if name is not None else f"__q{index}")
        return index

    def create_cbit(self, name: str | None = None) -> int:
        index = len(self._cbit_names)
        self._cbit_names.append(name if name is not None else f"__c{index}")
        return index

    def apply_operator(
        self, name: str, qubits: Sequence[int], cbits: Sequence[int] = ()
    ) -> int:
        """Append an instruction and return its index."""
        qubits = tuple(qubits)
        cbits = tuple(cbits)
        for q in qubits:
            if not 0 <= q < len(self._qubit_names):
                raise IndexError(f"qubit {q} does not exist")
        for c in cbits:
            if not 0 <= c < len(self._cbit_names):
                raise IndexError(f"cbit {c} does not exist")
        if len(set(qubits)) != len(qubits) or len(set(cbits)) != len(cbits):
            raise ValueError("an instruction cannot use a wire twice")
        index = len(self._instructions)
        wires = [("q", q) for q in qubits] + [("c", c) for c in cbits]
        preds = [self._last_on_wire[w] for w in wires if w in self._last_on_wire]
        for wire in wires:
            self._last_on_wire[wire] = index
        self._instructions.append(Instruction(name, qubits, cbits))
        self._predecessors.append(preds)
        return index

    def append(self, other: Circuit, qubits: Sequence[int]) -> None:
        """Append all of `other`, its qubit i placed on qubits[i]."""
        if len(qubits) != other.num_qubits():
            raise ValueError("qubit map does not match the appended circuit")
        for inst in other:
            self.apply_operator(inst.name, [qubits[q] for q in inst.qubits], inst.cbits)
        self.global_phase += other.global_phase

    def num_qubits(self) -> int:
        return len(self._qubit_names)

    def num_cbits(self) -> int:
        return len(self._cbit_names)

    def num_instructions(self) -> int:
        return len(self._instructions)

    def instruction(self, index: int) -> Instruction:
        return self._instructions[index]

    def predecessors(self, index: int) -> list[int]:
        """The previous instruction on each wire of `index`, one entry per wire."""
        return list(self._predecessors[index])

    def outputs(self) -> list[int]:
        """The last instruction on each used wire, qubits first, then cbits."""
        keys = [("q", q) for q in range(self.num_qubits())]
        keys += [("c", c) for c in range(self.num_cbits())]
        return [self._last_on_wire[k] for k in keys if k in self._last_on_wire]

    def shallow_duplicate(self) -> Circuit:
        """A circuit with the same wires and global phase but no instructions."""
        dup = Circuit()
        for name in self._qubit_names:
            dup.create_qubit(name)
        for name in self._cbit_names:
            dup.create_cbit(name)
        dup.global_phase = self.global_phase
        return dup

    def reversed(self) -> Circuit:
        """The same instructions in reverse order."""
        result = self.shallow_duplicate()
        for inst in reversed(self._instructions):
            result.apply_operator(inst.name, inst.qubits, inst.cbits)
        return result

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)


def _names(items: Iterable[str]) -> list[str]:
    return list(items)
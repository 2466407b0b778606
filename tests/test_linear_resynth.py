import random
from functools import reduce
from itertools import product
from operator import xor

import pytest

from qsynthkit.circuit import Circuit
from qsynthkit.linear_resynth import linear_resynth, partition_into_slices


def _circuit(num_qubits, num_cbits=0):
    circuit = Circuit()
    for _ in range(num_qubits):
        circuit.create_qubit()
    for _ in range(num_cbits):
        circuit.create_cbit()
    return circuit


def _simulate(circuit, bits):
    state = list(bits)
    for inst in circuit:
        target = inst.target()
        controls = inst.controls()
        if inst.name == "x":
            if all(state[c] for c in controls):
                state[target] ^= 1
        elif inst.name == "parity":
            state[target] ^= reduce(xor, (state[c] for c in controls), 0)
        else:
            raise AssertionError(f"unexpected gate {inst.name}")
    return state


def _equivalent(a, b):
    n = a.num_qubits()
    return all(_simulate(a, bits) == _simulate(b, bits) for bits in product((0, 1), repeat=n))


def test_partition_splits_at_non_linear_gate():
    circuit = _circuit(2)
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("h", [0])
    circuit.apply_operator("x", [0, 1])
    slices = partition_into_slices(circuit)
    assert slices == [([0], [1]), ([2], [])]


def test_partition_covers_every_instruction_once():
    circuit = _circuit(3)
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("t", [2])
    circuit.apply_operator("x", [0, 1, 2])
    circuit.apply_operator("x", [1, 2])
    circuit.apply_operator("h", [1])
    circuit.apply_operator("parity", [0, 2])
    slices = partition_into_slices(circuit)
    seen = sorted(i for s in slices for i in [*s.linear_gates, *s.non_linear_gates])
    assert seen == list(range(len(circuit)))


def test_cancelling_pair_is_removed():
    circuit = _circuit(2)
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("x", [0, 1])
    result = linear_resynth(circuit)
    assert result.num_instructions() == 0
    assert result.num_qubits() == 2


def test_single_cnot_is_kept():
    circuit = _circuit(2)
    circuit.apply_operator("x", [1, 0])
    result = linear_resynth(circuit)
    assert [inst.qubits for inst in result] == [(1, 0)]


def test_untouched_qubits_keep_indices():
    circuit = _circuit(4)
    circuit.apply_operator("x", [2, 3])
    circuit.apply_operator("x", [2, 3])
    circuit.apply_operator("x", [3, 1])
    result = linear_resynth(circuit)
    assert _equivalent(circuit, result)
    assert len(result) <= len(circuit)


def test_non_linear_gate_survives_between_slices():
    circuit = _circuit(2)
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("h", [1])
    circuit.apply_operator("x", [0, 1])
    circuit.apply_operator("x", [0, 1])
    result = linear_resynth(circuit)
    assert [inst.name for inst in result] == ["h"]


def test_wires_are_preserved():
    circuit = _circuit(3, num_cbits=2)
    circuit.apply_operator("x", [0, 1])
    result = linear_resynth(circuit)
    assert result.num_qubits() == 3
    assert result.num_cbits() == 2


def test_parity_gate_is_linear():
    circuit = _circuit(3)
    circuit.apply_operator("parity", [0, 1, 2])
    circuit.apply_operator("x", [0, 2])
    circuit.apply_operator("x", [1, 2])
    result = linear_resynth(circuit)
    assert _equivalent(circuit, result)
    assert len(result) <= len(circuit)


@pytest.mark.parametrize("seed", range(6))
def test_random_linear_circuits_stay_equivalent(seed):
    rng = random.Random(seed)
    circuit = _circuit(4)
    for _ in range(14):
        control, target = rng.sample(range(4), 2)
        circuit.apply_operator("x", [control, target])
    result = linear_resynth(circuit)
    assert _equivalent(circuit, result)
    assert len(result) <= len(circuit)


@pytest.mark.parametrize("section_size", [1, 2, 3])
def test_section_sizes_stay_equivalent(section_size):
    rng = random.Random(42)
    circuit = _circuit(5)
    for _ in range(20):
        control, target = rng.sample(range(5), 2)
        circuit.apply_operator("x", [control, target])
    result = linear_resynth(circuit, section_size=section_size)
    assert result.num_qubits() == 5
    for bits in product((0, 1), repeat=5):
        assert _simulate(result, bits) == _simulate(circuit, bits)
"""Quantum circuit synthesis from matrices, permutations and truth tables, and CNOT resynthesis."""

__version__ = "0.1.0"

__all__ = [
    "circuit",
    "device",
    "linear_resynth",
    "linear_synth",
    "placement",
    "pprm_synth",
    "transform_synth",
]
"""Assignment of virtual (circuit) qubits to physical (device) qubits."""

from __future__ import annotations


class Placement:
    """A partial one-to-one map between virtual and physical qubits.

    An unassigned qubit maps to None.
    """

    def __init__(self, num_virtual: int, num_physical: int) -> None:
        if num_virtual < 0 or num_physical < 0:
            raise ValueError("qubit counts must not be negative")
        self._v_to_phy: list[int | None] = [None] * num_virtual
        self._phy_to_v: list[int | None] = [None] * num_physical

    def v_to_phy(self, v: int | None = None):
        """The physical qubit of `v`, or the whole map when `v` is omitted."""
        if v is None:
            return list(self._v_to_phy)
        self._check_v(v)
        return self._v_to_phy[v]

    def phy_to_v(self, phy: int | None = None):
        """The virtual qubit on `phy`, or the whole map when `phy` is omitted."""
        if phy is None:
            return list(self._phy_to_v)
        self._check_phy(phy)
        return self._phy_to_v[phy]

    def map_v_phy(self, v: int, phy: int) -> None:
        """Place `v` on `phy`, dropping any earlier assignment of either."""
        self._check_v(v)
        self._check_phy(phy)
        old_phy = self._v_to_phy[v]
        if old_phy is not None:
            self._phy_to_v[old_phy] = None
        old_v = self._phy_to_v[phy]
        if old_v is not None:
            self._v_to_phy[old_v] = None
        self._v_to_phy[v] = phy
        self._phy_to_v[phy] = v

    def swap_qubits(self, phy0: int, phy1: int) -> None:
        """Exchange the virtual qubits sitting on two physical qubits."""
        self._check_phy(phy0)
        self._check_phy(phy1)
        v0, v1 = self._phy_to_v[phy0], self._phy_to_v[phy1]
        self._phy_to_v[phy0], self._phy_to_v[phy1] = v1, v0
        if v0 is not None:
            self._v_to_phy[v0] = phy1
        if v1 is not None:
            self._v_to_phy[v1] = phy0

    def free_physical(self) -> list[int]:
        """Physical qubits holding no virtual qubit, in increasing order."""
        return [phy for phy, v in enumerate(self._phy_to_v) if v is None]

    def unmapped_virtual(self) -> list[int]:
        """Virtual qubits not yet placed, in increasing order."""
        return [v for v, phy in enumerate(self._v_to_phy) if phy is None]

    def copy(self) -> Placement:
        dup = Placement(len(self._v_to_phy), len(self._phy_to_v))
        dup._v_to_phy = list(self._v_to_phy)
        dup._phy_to_v = list(self._phy_to_v)
        return dup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placement):
            return NotImplemented
        return self._v_to_phy == other._v_to_phy and self._phy_to_v == other._phy_to_v

    def __repr__(self) -> str:
        return f"Placement(v_to_phy={self._v_to_phy})"

    def _check_v(self, v: int) -> None:
        if not 0 <= v < len(self._v_to_phy):
            raise IndexError(f"virtual qubit {v} does not exist")

    def _check_phy(self, phy: int) -> None:
        if not 0 <= phy < len(self._phy_to_v):
            raise IndexError(f"physical qubit {phy} does not exist")


class Mapping:
    """The placement a routed circuit starts from and the one it ends with."""

    def __init__(self, placement: Placement) -> None:
        self.init_placement = placement.copy()
        self.placement = placement.copy()

    def __repr__(self) -> str:
        return f"Mapping(init={self.init_placement!r}, final={self.placement!r})"
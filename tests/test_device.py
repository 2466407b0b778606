import pytest

from qsynthkit.device import UNREACHABLE, Device


def test_path_edges_and_connectivity():
    device = Device.path(4)
    assert device.num_edges() == 3
    assert device.edge(0) == (0, 1)
    assert device.are_connected(1, 2)
    assert device.are_connected(2, 1)
    assert not device.are_connected(0, 2)


def test_path_distance():
    device = Device.path(5)
    assert device.distance(0, 4) == 4
    assert device.distance(3, 3) == 0


def test_distance_invariants():
    device = Device(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)])
    for u in range(5):
        for v in range(5):
            assert device.distance(u, v) == device.distance(v, u)
            assert (device.distance(u, v) == 1) == device.are_connected(u, v)
            for w in range(5):
                assert device.distance(u, w) <= device.distance(u, v) + device.distance(v, w)


def test_disconnected_is_unreachable():
    device = Device(4, [(0, 1), (2, 3)])
    assert device.distance(0, 3) == UNREACHABLE


def test_duplicate_edges_are_merged():
    device = Device(3, [(0, 1), (1, 0), (1, 2)])
    assert device.num_edges() == 2


def test_bad_edges_raise():
    with pytest.raises(ValueError):
        Device(2, [(1, 1)])
    with pytest.raises(IndexError):
        Device(2, [(0, 2)])
    with pytest.raises(ValueError):
        Device(-1)


def test_bad_qubit_in_query():
    device = Device.path(3)
    with pytest.raises(IndexError):
        device.distance(0, 3)
    with pytest.raises(IndexError):
        device.are_connected(-1, 0)
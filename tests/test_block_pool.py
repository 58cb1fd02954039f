import pytest

from openmenu.block_pool import BlockPool, PoolFullError, SlotFormat


def test_allocates_lowest_first():
    pool = BlockPool(1024, 4)
    assert [pool.allocate() for _ in range(4)] == [0, 1, 2, 3]


def test_full_pool_raises():
    pool = BlockPool(1024, 2)
    pool.allocate()
    pool.allocate()
    with pytest.raises(PoolFullError):
        pool.allocate()


def test_release_makes_slot_reusable():
    pool = BlockPool(1024, 3)
    for _ in range(3):
        pool.allocate()
    pool.release(1)
    assert pool.is_used(1) is False
    assert pool.allocate() == 1


def test_release_out_of_range_is_ignored():
    pool = BlockPool(1024, 2)
    pool.allocate()
    pool.release(5)
    assert pool.is_used(0) is True


def test_release_all():
    pool = BlockPool(1024, 2)
    pool.allocate()
    pool.allocate()
    pool.release_all()
    assert pool.allocate() == 0


def test_slot_size_and_offsets():
    pool = BlockPool(1000, 4)
    assert pool.slot_size * pool.slots <= pool.size
    assert pool.slot_offset(0) == 0
    assert pool.slot_offset(1) == pool.slot_size
    assert pool.slot_offset(3) - pool.slot_offset(2) == pool.slot_size


def test_slot_format_defaults_and_set():
    pool = BlockPool(1024, 2)
    assert pool.slot_format(1) == SlotFormat(0, 0, 0)
    pool.set_slot_format(1, 128, 64, 7)
    assert pool.slot_format(1) == SlotFormat(128, 64, 7)
    assert pool.slot_format(0) == SlotFormat(0, 0, 0)


def test_zero_slots_rejected():
    with pytest.raises(ValueError):
        BlockPool(1024, 0)
import pytest

from metispart.control import Control
from metispart.options import CType, DbgLvl, Options, RType


def test_kway_defaults():
    ctrl = Control(Options(), 1, 4, True)
    assert ctrl.op_type == 0
    assert ctrl.refine_type == 1
    assert ctrl.coarsen_type == 1
    assert ctrl.imbalance_factor == 30
    assert ctrl.num_iter == 10
    assert ctrl.seed == -1
    assert ctrl.num_init_parts == -1


def test_recursive_defaults():
    ctrl = Control(Options(), 1, 4, False)
    assert ctrl.op_type == 1
    assert ctrl.refine_type == 0
    assert ctrl.imbalance_factor == 1


def test_options_override_defaults():
    opts = Options(
        coarsen_type=CType.RM,
        refine_type=RType.FM,
        seed=42,
        imbalance_factor=5,
        debug_level=DbgLvl(info=True),
    )
    ctrl = Control(opts, 1, 2, True)
    assert ctrl.coarsen_type == int(CType.RM)
    assert ctrl.refine_type == int(RType.FM)
    assert ctrl.seed == 42
    assert ctrl.imbalance_factor == 5
    assert ctrl.debug_level == DbgLvl(info=True).to_int()


def test_imbalance_tolerance_grows_with_factor():
    low = Control(Options(imbalance_factor=1), 2, 2, True)
    high = Control(Options(imbalance_factor=30), 2, 2, True)
    assert len(low.imbalance_tols) == 2
    assert all(t > 1.0 for t in low.imbalance_tols)
    assert high.imbalance_tols[0] > low.imbalance_tols[0]


def test_target_weights_uniform():
    ctrl = Control(Options(), 2, 4, True)
    assert len(ctrl.target_part_weights) == 8
    assert sum(ctrl.target_part_weights[0::2]) == pytest.approx(1.0)
    assert len(set(ctrl.target_part_weights)) == 1


def test_alloc_neighbor_info_advances_and_clamps():
    ctrl = Control(Options(), 1, 3, True)
    ctrl.init_neighbor_pool(4)
    assert ctrl.alloc_neighbor_info(2) == 0
    assert ctrl.alloc_neighbor_info(10) == 2
    assert ctrl.neighbor_pool_pos == 5
    assert len(ctrl.neighbor_pool) >= ctrl.neighbor_pool_pos
    ctrl.reset_neighbor_pool()
    assert ctrl.alloc_neighbor_info(1) == 0


def test_kway_multipliers():
    ctrl = Control(Options(), 1, 4, True)
    ctrl.setup_kway_balance_multipliers([0.5])
    assert ctrl.partition_ij_balance_multipliers == pytest.approx([0.5 / 0.25] * 4)


def test_kway_multiplier_zero_target():
    ctrl = Control(Options(), 1, 2, True)
    ctrl.target_part_weights = [1.0, 0.0]
    ctrl.setup_kway_balance_multipliers([0.25])
    assert ctrl.partition_ij_balance_multipliers[1] == 0.0
    assert ctrl.partition_ij_balance_multipliers[0] == pytest.approx(0.25)


def test_2way_multipliers():
    ctrl = Control(Options(), 2, 2, False)
    ctrl.setup_2way_balance_multipliers([0.1, 0.2], [0.5, 0.5, 0.5, 0.0])
    m = ctrl.partition_ij_balance_multipliers
    assert m[:3] == pytest.approx([0.1 / 0.5, 0.2 / 0.5, 0.1 / 0.5])
    assert m[3] == 0.0
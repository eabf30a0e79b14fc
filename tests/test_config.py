import dataclasses

from hullcut.config import Params


def test_basic_defaults():
    params = Params()
    assert params.input_model == "../model.obj"
    assert params.output_name == "../output.obj"
    assert params.remesh_output_name == "../remesh.obj"
    assert params.threshold == 0.05
    assert params.resolution == 2000
    assert params.seed == 1234
    assert params.rv_k == 0.3


def test_mode_defaults():
    params = Params()
    assert params.preprocess_mode == "auto"
    assert params.apx_mode == "ch"
    assert params.merge is True
    assert params.pca is False
    assert params.decimate is False
    assert params.extrude is False


def test_limits_defaults():
    params = Params()
    assert params.mcts_nodes == 20
    assert params.prep_resolution == 50
    assert params.max_convex_hull == -1
    assert params.dmc_thres == 0.55
    assert params.max_ch_vertex == 256
    assert params.extrude_margin == 0.01
    assert params.mcts_iteration == 150
    assert params.mcts_max_depth == 3


def test_override_and_independence():
    a = Params(threshold=0.1, max_convex_hull=8)
    b = Params()
    assert a.threshold == 0.1
    assert a.max_convex_hull == 8
    assert b.threshold == 0.05
    c = dataclasses.replace(b, seed=7)
    assert c.seed == 7
    assert b.seed == 1234
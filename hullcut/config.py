"""Decomposition parameters and their defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Params:
    """Settings that drive the approximate convex decomposition."""

    input_model: str = "../model.obj"
    output_name: str = "../output.obj"
    remesh_output_name: str = "../remesh.obj"
    mcts_nodes: int = 20
    threshold: float = 0.05
    resolution: int = 2000
    seed: int = 1234
    rv_k: float = 0.3
    preprocess_mode: str = "auto"
    prep_resolution: int = 50
    pca: bool = False
    merge: bool = True
    max_convex_hull: int = -1
    dmc_thres: float = 0.55
    apx_mode: str = "ch"
    decimate: bool = False
    max_ch_vertex: int = 256
    extrude: bool = False
    extrude_margin: float = 0.01

    mcts_iteration: int = 150
    mcts_max_depth: int = 3
"""Convex hulls, mesh geometry helpers and Hausdorff distances for convex decomposition."""

__version__ = "0.1.0"
__all__ = [
    "config",
    "shape",
    "costmatrix",
    "vector3",
    "hullmath",
    "point_source",
    "mesh_builder",
    "convex_hull",
    "halfedge_mesh",
    "hausdorff",
    "hull_setup",
    "quickhull",
]
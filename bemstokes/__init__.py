"""Stokes kernels, free-surface image kernels, a direct preconditioner and flagellar geometry."""

__version__ = "0.1.0"
__all__ = ["kernel", "free_surface_kernel", "direct_preconditioner", "flagellar_geometry"]
"""Boundary layer growth viewer."""

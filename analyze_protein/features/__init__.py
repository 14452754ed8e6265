"""Geometric statistics of atom sets."""

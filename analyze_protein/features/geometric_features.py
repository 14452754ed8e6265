#!/usr/bin/env python3
"""
Geometric Summary Statistics for PDB Atom Sets

Computes, for the atoms of one structure:
- Center of gravity (Cg)
- Radius of gyration (Rg) - RMS distance from Cg
- Maximum pairwise distance (Dmax) - exhaustive over all atom pairs

All arithmetic is single precision with left-to-right accumulation, so
results printed to 3 decimals agree with float-based reference tools.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from ..config import RESULT_COLUMNS
from ..exceptions import EmptyResultError
from ..structure.pdb_parser import collect_atoms


@dataclass(frozen=True)
class AnalysisResult:
    """Geometry of one PDB file."""
    path: str
    n_atoms: int
    center_of_gravity: Tuple[float, float, float]
    radius_of_gyration: float
    max_distance: float

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        cg_x, cg_y, cg_z = self.center_of_gravity
        return {
            'path': self.path,
            'n_atoms': self.n_atoms,
            'cg_x': cg_x,
            'cg_y': cg_y,
            'cg_z': cg_z,
            'rg': self.radius_of_gyration,
            'dmax': self.max_distance
        }


# =============================================================================
# HELPERS
# =============================================================================

def _as_atoms(atoms) -> np.ndarray:
    atoms = np.asarray(atoms, dtype=np.float32).reshape(-1, 3)
    if len(atoms) == 0:
        raise ValueError("Geometry needs at least one atom")
    return atoms


def _sequential_sum(values: np.ndarray) -> np.ndarray:
    """Sum along axis 0 one element at a time (cumsum does not reorder)."""
    return np.cumsum(values, axis=0, dtype=np.float32)[-1]


def pairwise_distance(point_a, point_b) -> np.float32:
    """Euclidean distance between two 3-D points."""
    a = np.asarray(point_a, dtype=np.float32)
    b = np.asarray(point_b, dtype=np.float32)
    d = a - b
    return np.sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2])


# =============================================================================
# CENTER OF GRAVITY / RADIUS OF GYRATION
# =============================================================================

def center_of_gravity(atoms) -> np.ndarray:
    """Componentwise mean of the atom coordinates, shape (3,)."""
    atoms = _as_atoms(atoms)
    return _sequential_sum(atoms) / np.float32(len(atoms))


def radius_of_gyration(atoms, center: Optional[np.ndarray] = None) -> np.float32:
    """
    Rg = sqrt(mean(|r_i - Cg|^2))

    Args:
        atoms: (n, 3) coordinates
        center: Precomputed center of gravity (computed if omitted)
    """
    atoms = _as_atoms(atoms)
    if center is None:
        center = center_of_gravity(atoms)

    d = atoms - np.asarray(center, dtype=np.float32)
    # Square the rounded distance, as distance-then-square accumulation does
    dist = np.sqrt(d[:, 0] * d[:, 0] + d[:, 1] * d[:, 1] + d[:, 2] * d[:, 2])
    return np.sqrt(_sequential_sum(dist * dist) / np.float32(len(atoms)))


# =============================================================================
# MAXIMUM PAIRWISE DISTANCE
# =============================================================================

def max_pairwise_distance(atoms) -> np.float32:
    """
    Largest distance over all unordered atom pairs.

    O(n^2): each atom is compared against every later atom, one row of
    distances at a time. A single atom has Dmax = 0.
    """
    atoms = _as_atoms(atoms)
    n_atoms = len(atoms)

    max_dist = np.float32(0.0)
    for i in range(n_atoms - 1):
        d = atoms[i + 1:] - atoms[i]
        dist = np.sqrt(d[:, 0] * d[:, 0] + d[:, 1] * d[:, 1] + d[:, 2] * d[:, 2])
        row_max = dist.max()
        if row_max > max_dist:
            max_dist = row_max

    return max_dist


# =============================================================================
# MAIN ANALYSIS FUNCTIONS
# =============================================================================

def analyze_atoms(atoms, path: Union[str, Path] = '') -> AnalysisResult:
    """
    Compute Cg, Rg and Dmax for one atom set.

    Raises:
        EmptyResultError: no atoms to analyze
    """
    atoms = np.asarray(atoms, dtype=np.float32).reshape(-1, 3)
    if len(atoms) == 0:
        raise EmptyResultError(path)

    cg = center_of_gravity(atoms)
    rg = radius_of_gyration(atoms, cg)
    dmax = max_pairwise_distance(atoms)

    return AnalysisResult(
        path=str(path),
        n_atoms=len(atoms),
        center_of_gravity=(float(cg[0]), float(cg[1]), float(cg[2])),
        radius_of_gyration=float(rg),
        max_distance=float(dmax)
    )


def analyze_file(pdb_path: Union[str, Path]) -> AnalysisResult:
    """Read a PDB file and analyze its ATOM coordinates."""
    atoms = collect_atoms(pdb_path)
    return analyze_atoms(atoms, pdb_path)


def get_result_columns() -> List[str]:
    """Ordered column names of a results table (see AnalysisResult.to_dict)."""
    return list(RESULT_COLUMNS)

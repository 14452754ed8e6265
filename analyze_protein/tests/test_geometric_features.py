"""
Tests for Cg / Rg / Dmax.

Tests:
- Known small configurations
- Single atom edge case
- Order invariance
- Dmax against brute force on random inputs
- Full pipeline from a PDB file
"""

import itertools
import math

import numpy as np
import pytest

from analyze_protein.exceptions import EmptyResultError
from analyze_protein.features.geometric_features import (
    AnalysisResult,
    analyze_atoms,
    analyze_file,
    center_of_gravity,
    get_result_columns,
    max_pairwise_distance,
    pairwise_distance,
    radius_of_gyration,
)

from conftest import atom_lines


def brute_force_dmax(coords):
    coords = np.asarray(coords, dtype=np.float64)
    return max((np.linalg.norm(a - b) for a, b in itertools.combinations(coords, 2)),
               default=0.0)


def brute_force_rg(coords):
    coords = np.asarray(coords, dtype=np.float64)
    centroid = coords.mean(axis=0)
    return math.sqrt(np.mean(np.sum((coords - centroid) ** 2, axis=1)))


def test_pairwise_distance():
    assert pairwise_distance([0.0, 0.0, 0.0], [1.0, 2.0, 2.0]) == 3.0
    assert pairwise_distance([1.0, 2.0, 2.0], [0.0, 0.0, 0.0]) == 3.0
    assert pairwise_distance([5.0, 5.0, 5.0], [5.0, 5.0, 5.0]) == 0.0


def test_two_atoms():
    atoms = np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0]], dtype=np.float32)

    assert center_of_gravity(atoms).tolist() == [1.5, 2.0, 0.0]
    # both atoms are 2.5 from Cg
    assert radius_of_gyration(atoms) == pytest.approx(math.sqrt((2.5 ** 2 + 2.5 ** 2) / 2))
    assert radius_of_gyration(atoms) == 2.5
    assert max_pairwise_distance(atoms) == 5.0


def test_single_atom():
    result = analyze_atoms([[1.0, 2.0, 3.0]], 'one.pdb')

    assert result.n_atoms == 1
    assert result.center_of_gravity == (1.0, 2.0, 3.0)
    assert result.radius_of_gyration == 0.0
    assert result.max_distance == 0.0


def test_empty_atoms():
    with pytest.raises(EmptyResultError):
        analyze_atoms(np.zeros((0, 3), dtype=np.float32), 'empty.pdb')

    with pytest.raises(ValueError):
        center_of_gravity([])


def test_center_of_gravity_order_invariant():
    rng = np.random.default_rng(0)
    atoms = rng.uniform(-50.0, 50.0, size=(200, 3)).astype(np.float32)
    shuffled = atoms[rng.permutation(len(atoms))]

    assert np.allclose(center_of_gravity(atoms), center_of_gravity(shuffled), atol=1e-3)
    assert np.allclose(center_of_gravity(atoms), atoms.astype(np.float64).mean(axis=0), atol=1e-3)


@pytest.mark.parametrize("seed", range(5))
def test_dmax_matches_brute_force(seed):
    rng = np.random.default_rng(seed)
    n_atoms = int(rng.integers(2, 40))
    atoms = rng.uniform(-100.0, 100.0, size=(n_atoms, 3)).astype(np.float32)

    assert max_pairwise_distance(atoms) == pytest.approx(brute_force_dmax(atoms), rel=1e-5)


@pytest.mark.parametrize("seed", range(5))
def test_rg_matches_definition(seed):
    rng = np.random.default_rng(100 + seed)
    atoms = rng.uniform(-100.0, 100.0, size=(50, 3)).astype(np.float32)

    assert radius_of_gyration(atoms) == pytest.approx(brute_force_rg(atoms), rel=1e-4)


def test_dmax_is_translation_invariant():
    atoms = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 7.0, 0.0], [2.0, 2.0, 2.0]],
                     dtype=np.float32)

    assert max_pairwise_distance(atoms) == max_pairwise_distance(atoms + 10.0)
    assert max_pairwise_distance(atoms) == pytest.approx(math.sqrt(50.0))


def test_result_row():
    result = AnalysisResult('a.pdb', 2, (1.5, 2.0, 0.0), 2.5, 5.0)
    row = result.to_dict()

    assert list(row) == get_result_columns()
    assert row == {'path': 'a.pdb', 'n_atoms': 2, 'cg_x': 1.5, 'cg_y': 2.0,
                   'cg_z': 0.0, 'rg': 2.5, 'dmax': 5.0}


def test_analyze_file(write_pdb):
    path = write_pdb(["HEADER    TEST\n"] + atom_lines([(0.0, 0.0, 0.0), (3.0, 4.0, 0.0)]))

    result = analyze_file(path)

    assert result.path == str(path)
    assert result.n_atoms == 2
    assert result.center_of_gravity == (1.5, 2.0, 0.0)
    assert result.radius_of_gyration == 2.5
    assert result.max_distance == 5.0


def test_analyze_file_without_atoms(write_pdb):
    path = write_pdb(["HEADER    TEST\n", "END\n"])

    with pytest.raises(EmptyResultError):
        analyze_file(path)

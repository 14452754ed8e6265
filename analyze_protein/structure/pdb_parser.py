#!/usr/bin/env python3
"""
Fixed-column PDB parser for ATOM coordinates

Reads only what the geometry needs: the x/y/z fields of ``ATOM  `` records.
Works record by record on the raw text, no structure hierarchy is built.

Records are delivered the way an 80-byte line buffer reads them:
at most 79 characters each, line terminator included, so a physical line
longer than that continues as the next record.
"""

import math
import re
from pathlib import Path
from typing import Iterator, Tuple, Union

import numpy as np

from ..config import (
    ATOM_PREFIX,
    COORDINATE_OFFSETS,
    COORDINATE_WIDTH,
    MAX_ATOMS,
    MAX_LINE_LENGTH,
    MIN_LINE_LENGTH,
)
from ..exceptions import (
    CoordinateParseError,
    EmptyResultError,
    FileOpenError,
    MalformedLineError,
)

# Plain decimal, optional exponent. Rejects nan/inf and Python-only forms like "1_0"
_DECIMAL_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_FLOAT32_MAX = float(np.finfo(np.float32).max)


# =============================================================================
# LINE CLASSIFIER
# =============================================================================

def is_atom_line(line: str) -> bool:
    """True if the record is an ``ATOM  `` record (HETATM and others are not)."""
    return line[:len(ATOM_PREFIX)] == ATOM_PREFIX


def check_atom_line(line: str) -> None:
    """Raise MalformedLineError if an ATOM record cannot hold all coordinates."""
    if len(line) < MIN_LINE_LENGTH:
        raise MalformedLineError(len(line))


# =============================================================================
# COORDINATE EXTRACTOR
# =============================================================================

def parse_coordinate(line: str, offset: int) -> np.float32:
    """
    Parse the 8-character coordinate field starting at ``offset``.

    PDB fields are right-justified, so whitespace around the number is
    accepted. Parsing does not depend on the locale.

    Raises:
        CoordinateParseError: field is not a finite decimal number
    """
    field = line[offset:offset + COORDINATE_WIDTH]
    text = field.strip()

    if not _DECIMAL_RE.fullmatch(text):
        raise CoordinateParseError(field)

    value = float(text)
    if not math.isfinite(value) or abs(value) > _FLOAT32_MAX:
        raise CoordinateParseError(field)

    return np.float32(value)


def parse_atom_line(line: str) -> Tuple[np.float32, np.float32, np.float32]:
    """Extract (x, y, z) from an ATOM record."""
    check_atom_line(line)
    x, y, z = (parse_coordinate(line, offset) for offset in COORDINATE_OFFSETS)
    return x, y, z


# =============================================================================
# ATOM COLLECTOR
# =============================================================================

def iter_records(handle, record_length: int = MAX_LINE_LENGTH - 1) -> Iterator[str]:
    """
    Yield records of at most ``record_length`` characters.

    Each physical line keeps its terminator; lines longer than the record
    length are split into consecutive records.
    """
    for line in handle:
        while len(line) > record_length:
            yield line[:record_length]
            line = line[record_length:]
        if line:
            yield line


def read_atoms(pdb_path: Union[str, Path], max_atoms: int = MAX_ATOMS) -> np.ndarray:
    """
    Read ATOM coordinates from a PDB file.

    Args:
        pdb_path: Path to PDB file
        max_atoms: Capacity; reading stops once this many atoms are stored

    Returns:
        Read-only float32 array of shape (n_atoms, 3), rows in file order.
        May be empty.

    Raises:
        FileOpenError: file cannot be opened
        MalformedLineError: an ATOM record is too short
        CoordinateParseError: a coordinate field is not a number
    """
    coords = []

    try:
        # latin-1 maps every byte, PDB files are plain ASCII anyway
        handle = open(pdb_path, 'r', encoding='latin-1', newline='')
    except OSError:
        raise FileOpenError(pdb_path) from None

    with handle:
        for record in iter_records(handle):
            if len(coords) >= max_atoms:
                break
            if is_atom_line(record):
                coords.append(parse_atom_line(record))

    atoms = np.array(coords, dtype=np.float32).reshape(-1, 3)
    atoms.flags.writeable = False
    return atoms


def collect_atoms(pdb_path: Union[str, Path], max_atoms: int = MAX_ATOMS) -> np.ndarray:
    """Like read_atoms, but an empty result raises EmptyResultError."""
    atoms = read_atoms(pdb_path, max_atoms=max_atoms)

    if len(atoms) == 0:
        raise EmptyResultError(pdb_path)

    return atoms

"""Shared fixtures: synthetic PDB files."""

import pytest

ATOM_FMT = ("ATOM  {serial:5d} {name:<4s} {resname:3s} {chain:1s}{resseq:4d}    "
            "{x:8.3f}{y:8.3f}{z:8.3f}{occ:6.2f}{bfac:6.2f}          {element:>2s}\n")


def atom_line(x, y, z, serial=1, name='CA', resname='ALA', chain='A',
              resseq=1, element='C'):
    """A well-formed 78-column ATOM record (79 characters with newline)."""
    return ATOM_FMT.format(serial=serial, name=name, resname=resname, chain=chain,
                           resseq=resseq, x=x, y=y, z=z, occ=1.0, bfac=20.0,
                           element=element)


def atom_lines(coords):
    """ATOM records with serial and residue numbers wrapped to their column widths."""
    return [atom_line(x, y, z, serial=(i % 99999) + 1, resseq=(i % 9999) + 1)
            for i, (x, y, z) in enumerate(coords)]


@pytest.fixture
def write_pdb(tmp_path):
    """Write lines to a .pdb file in tmp_path and return its path."""
    def _write(lines, name='sample.pdb'):
        path = tmp_path / name
        path.write_text(''.join(lines))
        return path
    return _write

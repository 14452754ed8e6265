"""PDB file reading."""

"""
PDB Geometry Analysis

Reads the ATOM records of PDB files and reports, per file:
- Center of gravity (Cg)
- Radius of gyration (Rg)
- Maximum pairwise atom distance (Dmax)

Modules:
- structure.pdb_parser: fixed-column ATOM record reader
- features.geometric_features: Cg / Rg / Dmax
- utils.report: text report and results table
- cli.analyze_protein: AnalyzeProtein command line
"""

from .exceptions import (
    AnalyzeProteinError,
    CoordinateParseError,
    EmptyResultError,
    FileOpenError,
    MalformedLineError,
    UsageError,
)
from .structure.pdb_parser import collect_atoms, read_atoms
from .features.geometric_features import AnalysisResult, analyze_atoms, analyze_file

__version__ = "1.0.0"

__all__ = [
    'AnalysisResult',
    'analyze_atoms',
    'analyze_file',
    'collect_atoms',
    'read_atoms',
    'AnalyzeProteinError',
    'UsageError',
    'FileOpenError',
    'MalformedLineError',
    'CoordinateParseError',
    'EmptyResultError',
]

"""
Fixed-format constants for PDB ATOM records and the analyzer report.

Columns follow the PDB v3.3 ATOM record layout (0-based offsets here):
    31-38  x orthogonal coordinate (Å)
    39-46  y orthogonal coordinate (Å)
    47-54  z orthogonal coordinate (Å)
"""

# =============================================================================
# ATOM RECORD LAYOUT
# =============================================================================

ATOM_PREFIX = "ATOM  "

X_OFFSET = 30
Y_OFFSET = 38
Z_OFFSET = 46
COORDINATE_OFFSETS = (X_OFFSET, Y_OFFSET, Z_OFFSET)
COORDINATE_WIDTH = 8

# Record length as read, line terminator included
MIN_LINE_LENGTH = 61
# Size of the record buffer; one slot is reserved for the terminator
MAX_LINE_LENGTH = 80

MAX_ATOMS = 20000

# =============================================================================
# MESSAGES
# =============================================================================

PROGRAM_NAME = "AnalyzeProtein"

USAGE_MSG = f"Usage: {PROGRAM_NAME} <pdb1> <pdb2> ..."
FILE_OPEN_MSG = "Error opening file: {path}"
SHORT_LINE_MSG = "ATOM line is too short {length} characters"
COORDINATE_MSG = "Error in coordinate conversion {field}!"
ZERO_ATOMS_MSG = "Error - 0 atoms were found in the file {path}"

# =============================================================================
# REPORT
# =============================================================================

HEADER_FMT = "PDB file {path}, {n_atoms} atoms were read"
CG_FMT = "Cg = {:.3f} {:.3f} {:.3f}"
RG_FMT = "Rg = {:.3f}"
DMAX_FMT = "Dmax = {:.3f}"

RESULT_COLUMNS = ['path', 'n_atoms', 'cg_x', 'cg_y', 'cg_z', 'rg', 'dmax']

#!/usr/bin/env python3
"""
Report formatting and results table export

Text report (one per file, stdout):
    PDB file <path>, <n> atoms were read
    Cg = <x> <y> <z>
    Rg = <rg>
    Dmax = <dmax>

Table export: one row per analyzed file, CSV or Parquet by file suffix.
"""

import sys
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from ..config import CG_FMT, DMAX_FMT, HEADER_FMT, RG_FMT
from ..features.geometric_features import AnalysisResult, get_result_columns


def format_report(result: AnalysisResult) -> List[str]:
    """The four report lines for one file, without trailing newlines."""
    return [
        HEADER_FMT.format(path=result.path, n_atoms=result.n_atoms),
        CG_FMT.format(*result.center_of_gravity),
        RG_FMT.format(result.radius_of_gyration),
        DMAX_FMT.format(result.max_distance),
    ]


def print_report(result: AnalysisResult, stream=None) -> None:
    stream = stream if stream is not None else sys.stdout
    for line in format_report(result):
        print(line, file=stream)


def results_to_frame(results: Iterable[AnalysisResult]) -> pd.DataFrame:
    """Results as a DataFrame with columns in report order."""
    return pd.DataFrame([r.to_dict() for r in results], columns=get_result_columns())


def save_results(results: Iterable[AnalysisResult], output_path: Union[str, Path]) -> Path:
    """
    Save results as a table.

    ``.parquet`` writes Parquet, anything else CSV.

    Returns:
        Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = results_to_frame(results)

    if output_path.suffix == '.parquet':
        df.to_parquet(output_path, index=False)
    else:
        df.to_csv(output_path, index=False)

    return output_path

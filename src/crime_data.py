from __future__ import annotations
import time
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from two_d_tree import TwoDTree


def default_data_path() -> Path:
    project_root = Path(__file__).resolve().parent.parent
    return project_root / "data" / "CrimeLatLonXY.csv"


def load_dataset(path: Optional[str | Path] = None) -> pd.DataFrame:
    "Διαβάζει το csv των εγκλημάτων ως κείμενο (η πρώτη γραμμή είναι header)."
    file_path = Path(path) if path is not None else default_data_path()
    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    print(f"[DATA] Raw rows: {len(df)}")
    return df


def preprocess_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """Κρατάει τις γραμμές με έγκυρες συντεταγμένες X, Y (στήλες 0 και 1).

Επιστρέφει DataFrame με στήλες x, y, crime_data όπου crime_data είναι η
αρχική γραμμή του csv. Οι γραμμές που δεν διαβάζονται απορρίπτονται και
μετριούνται, δεν σταματάνε τη φόρτωση."""
    if df.shape[1] < 2:
        raise ValueError("Crime data needs at least two columns (X, Y)")

    xs = pd.to_numeric(df.iloc[:, 0], errors="coerce").to_numpy(dtype=float)
    ys = pd.to_numeric(df.iloc[:, 1], errors="coerce").to_numpy(dtype=float)

    #ksanaftiaxnoume ti grammi tou csv gia payload
    crime_data = [",".join(str(v) for v in row) for row in df.itertuples(index=False, name=None)]

    out = pd.DataFrame({"x": xs, "y": ys, "crime_data": crime_data})

    #NaN (apo to coerce) kai inf den mpainoun sto dentro
    mask = np.isfinite(out["x"].to_numpy()) & np.isfinite(out["y"].to_numpy())
    skipped = int((~mask).sum())
    if skipped:
        print(f"[DATA] Skipped {skipped} rows with unparseable coordinates")

    out = out[mask].reset_index(drop=True)
    print(f"[DATA] Rows after preprocessing: {len(out)}")
    return out


def iter_crime_records(df: pd.DataFrame) -> Iterator[Tuple[float, float, Any]]:
    "Τριάδες (x, y, payload) με τη σειρά του αρχείου."
    for x, y, crime in zip(df["x"], df["y"], df["crime_data"]):
        yield float(x), float(y), crime


def crime_points(df: pd.DataFrame) -> np.ndarray:
    return df[["x", "y"]].to_numpy(dtype=float)


#measure to build time
def build_crime_tree(df: pd.DataFrame) -> Tuple[TwoDTree, float]:
    t0 = time.perf_counter()
    tree = TwoDTree.from_records(iter_crime_records(df))
    t1 = time.perf_counter()
    build_time = t1 - t0
    return tree, build_time

"""Load rosters from long-format CSV (one line per staff and day)."""
from pathlib import Path
from typing import Union

import pandas as pd

from shiftgrid.errors import MalformedInputError
from shiftgrid.models.shift import ShiftEntry, to_utc_date
from shiftgrid.models.staff import StaffEntry, StaffRoster
from shiftgrid.utils.logging_setup import get_logger

logger = get_logger("shiftgrid.io.csv_loader")

COLUMNS = ["staff_id", "staff_name", "shift_id", "shift_date", "shift_code"]

_ALIASES = {
    "staff_id": ("staff_id", "staffid", "employee_id"),
    "staff_name": ("staff_name", "name", "staff", "employee"),
    "shift_id": ("shift_id", "shiftid", "id"),
    "shift_date": ("shift_date", "date", "day"),
    "shift_code": ("shift_code", "code", "shift"),
}


def _canonical_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename case/space variants and aliases to the canonical columns."""
    colmap = {str(c).lower().strip().replace(" ", "_"): c for c in df.columns}

    def pick(candidates):
        for c in candidates:
            if c in colmap:
                return colmap[c]
        return None

    rename = {}
    for canonical, candidates in _ALIASES.items():
        found = pick(candidates)
        if found is not None:
            rename[found] = canonical
    return df.rename(columns=rename)


def load_roster_csv(source: Union[str, Path, pd.DataFrame]) -> StaffRoster:
    """
    Load a roster from a long-format CSV file or DataFrame.

    Staff entries keep their first-appearance order; shifts are sorted by
    date within each entry. Missing codes become the ``-`` placeholder.

    Raises:
        MalformedInputError: no staff id/name columns
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)

    df = _canonical_columns(df)
    if "staff_id" not in df.columns or "staff_name" not in df.columns:
        raise MalformedInputError("CSV must have 'staff_id' and 'staff_name' columns",
                                  payload_type="DataFrame")

    if "shift_code" not in df.columns:
        df["shift_code"] = "-"
    df["shift_code"] = df["shift_code"].fillna("").astype(str).str.strip().replace("", "-")
    if "shift_id" not in df.columns:
        df["shift_id"] = None

    staff = {}
    for _, row in df.iterrows():
        sid = int(row["staff_id"])
        entry = staff.get(sid)
        if entry is None:
            entry = staff[sid] = StaffEntry(id=sid, name=str(row["staff_name"]).strip())
        if not str(row.get("shift_date", "")).strip():
            continue
        shift_id = row["shift_id"]
        entry.shifts.append(ShiftEntry(
            id=int(shift_id) if shift_id not in (None, "") and not pd.isna(shift_id) else None,
            date=to_utc_date(str(row["shift_date"])),
            code=row["shift_code"],
        ))

    for entry in staff.values():
        entry.shifts.sort(key=lambda s: s.date)

    logger.info(f"Loaded {len(staff)} staff entries from CSV ({len(df)} lines)")
    return StaffRoster(staff=list(staff.values()))


def roster_to_dataframe(roster: StaffRoster) -> pd.DataFrame:
    """Flatten a roster to the long CSV layout."""
    rows = [
        {
            "staff_id": st.id,
            "staff_name": st.name,
            "shift_id": sh.id,
            "shift_date": sh.iso_date,
            "shift_code": sh.code,
        }
        for st in roster
        for sh in st.shifts
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS)
    return pd.DataFrame(rows, columns=COLUMNS)


def save_roster_csv(roster: StaffRoster, path: Union[str, Path]) -> None:
    """Write a roster in long CSV format."""
    roster_to_dataframe(roster).to_csv(path, index=False)

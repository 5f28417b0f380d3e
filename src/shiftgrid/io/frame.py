"""Tabular views of a built grid."""
import pandas as pd

from shiftgrid.grid.builder import GridStructure


def grid_to_dataframe(grid: GridStructure) -> pd.DataFrame:
    """
    Staff x date matrix of shift codes.

    Index is the staff name, columns the ISO dates of the column schedule.
    Ragged rows (position alignment) are padded with empty strings or cut
    to the schedule width.
    """
    dates = [c.iso_date for c in grid.columns]
    names = []
    rows = []
    for row in grid.body:
        names.append(row[0].text)
        codes = [c.text for c in row[1:1 + len(dates)]]
        codes.extend([""] * (len(dates) - len(codes)))
        rows.append(codes)
    df = pd.DataFrame(rows, index=pd.Index(names, name="staff"), columns=dates)
    return df


def export_to_csv(grid: GridStructure, output) -> None:
    """Write the staff x date matrix as CSV (path or text buffer)."""
    grid_to_dataframe(grid).to_csv(output)


def shift_counts(grid: GridStructure) -> pd.DataFrame:
    """Number of staff on each shift code per date, placeholders excluded."""
    df = grid_to_dataframe(grid)
    if df.empty:
        return pd.DataFrame()
    long = df.reset_index().melt(id_vars="staff", var_name="date", value_name="code")
    long = long[(long["code"] != "-") & (long["code"] != "")]
    if long.empty:
        return pd.DataFrame(columns=df.columns)
    counts = long.pivot_table(index="code", columns="date", values="staff",
                              aggfunc="count", fill_value=0)
    return counts.reindex(columns=df.columns, fill_value=0).astype(int)

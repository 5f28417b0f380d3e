# shiftgrid/io - Input/output handling
from .csv_loader import load_roster_csv, roster_to_dataframe, save_roster_csv
from .excel_export import export_to_excel
from .frame import export_to_csv, grid_to_dataframe, shift_counts
from .json_loader import dump_roster_json, load_roster_json
from .pdf_export import export_to_pdf

__all__ = [
    "load_roster_json", "dump_roster_json",
    "load_roster_csv", "save_roster_csv", "roster_to_dataframe",
    "grid_to_dataframe", "shift_counts", "export_to_csv",
    "export_to_excel", "export_to_pdf",
]

"""Load roster payloads from JSON documents."""
import json
from pathlib import Path
from typing import IO, Union

from shiftgrid.errors import MalformedInputError
from shiftgrid.grid.normalize import normalize_roster
from shiftgrid.models.staff import StaffRoster
from shiftgrid.utils.logging_setup import get_logger

logger = get_logger("shiftgrid.io.json_loader")


def load_roster_json(source: Union[str, Path, IO[str]]) -> StaffRoster:
    """
    Load a roster from a JSON file, JSON text or open file.

    A string that does not start with ``{`` is treated as a path.

    Raises:
        MalformedInputError: invalid JSON or no ``staff`` collection
    """
    if hasattr(source, "read"):
        text = source.read()
        origin = getattr(source, "name", "<stream>")
    elif isinstance(source, str) and source.lstrip().startswith("{"):
        text = source
        origin = "<string>"
    else:
        path = Path(source)
        text = path.read_text(encoding="utf-8")
        origin = str(path)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {origin}: {e}")
        raise MalformedInputError(f"invalid JSON roster payload: {e}", payload_type="str") from e

    roster = normalize_roster(payload)
    logger.info(f"Loaded roster from {origin}: {len(roster)} staff entries")
    return roster


def dump_roster_json(roster: StaffRoster, path: Union[str, Path]) -> None:
    """Write a roster in the canonical payload format."""
    Path(path).write_text(json.dumps(roster.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")

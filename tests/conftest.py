"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest


def make_staff(staff_id, name, days, codes=None, first_shift_id=1):
    """Staff payload with one shift per ISO date."""
    codes = codes or ["-"] * len(days)
    return {
        "id": staff_id,
        "name": name,
        "shifts": [
            {"id": first_shift_id + i, "date": d, "code": c}
            for i, (d, c) in enumerate(zip(days, codes))
        ],
    }


@pytest.fixture
def ada_payload():
    """Single staff entry straddling a month boundary."""
    return {
        "staff": [
            {
                "id": 1,
                "name": "Ada",
                "shifts": [
                    {"id": 10, "date": "2024-01-31", "code": "C"},
                    {"id": 11, "date": "2024-02-01", "code": "-"},
                ],
            }
        ]
    }


@pytest.fixture
def year_end_payload():
    """Three staff over Dec 30 - Jan 2."""
    days = ["2023-12-30", "2023-12-31", "2024-01-01", "2024-01-02"]
    return {
        "staff": [
            make_staff(1, "Jones, Tom", days, ["-", "C", "C", "-"], first_shift_id=100),
            make_staff(2, "Smith, Ann", days, ["V", "V", "-", "-"], first_shift_id=200),
            make_staff(3, "Lee, Kim", days, ["-", "-", "S", "O"], first_shift_id=300),
        ]
    }


@pytest.fixture
def legacy_payload():
    """Payload using the shift_* field names and a keyed staff object."""
    return {
        "staff": {
            "a": {
                "id": 7,
                "name": "Jones, Tom",
                "shifts": [
                    {"shift_date": "2024-07-30", "shift_id": 1, "shift_code": "C"},
                    {"shift_date": "2024-07-31", "shift_id": 2, "shift_code": "-"},
                    {"shift_date": "2024-08-01", "shift_id": 3, "shift_code": "V"},
                ],
            },
            "b": {
                "id": 8,
                "name": "Smith, Ann",
                "shifts": [
                    {"shift_date": "2024-07-30", "shift_id": 4, "shift_code": "-"},
                    {"shift_date": "2024-07-31", "shift_id": 5, "shift_code": "S"},
                    {"shift_date": "2024-08-01", "shift_id": 6, "shift_code": "-"},
                ],
            },
        }
    }

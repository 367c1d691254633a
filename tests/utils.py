from typing import Any
from unittest.mock import MagicMock

ALICE_UUID = "0b1a4f0e-6a3c-4f2b-9d8e-1c2b3a4d5e6f"
BOB_UUID = "5d2c7e1a-3b4f-4a6d-8e9f-0a1b2c3d4e5f"
CHARLIE_UUID = "9f8e7d6c-5b4a-4392-8170-6f5e4d3c2b1a"
PART_UUID = "c3d2e1f0-a9b8-4c7d-b6e5-f4a3b2c1d0e9"


def make_response(json_data: Any = None, text: str = "", status_code: int = 200) -> MagicMock:
    """
    Helper function to create a mocked requests.Response
    """
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from jsonschema import Draft7Validator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def validator_for() -> Callable[[dict[str, Any]], Draft7Validator]:
    def build(document: dict[str, Any]) -> Draft7Validator:
        Draft7Validator.check_schema(document)
        return Draft7Validator(document)

    return build

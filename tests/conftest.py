from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedTransport:
    """Async transport double: returns (or raises) the scripted responses in order."""

    def __init__(self, *responses: Any):
        self._responses = list(responses)
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def __call__(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((url, dict(params)))
        if not self._responses:
            raise AssertionError(f"unexpected request: {url} {params}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def scripted_transport():
    return ScriptedTransport

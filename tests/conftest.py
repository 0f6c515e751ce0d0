from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_CONFIG = """
do: status
devices:
  kitchen: 192.168.10.44:9999
  lamp: 192.168.10.45
  heater: 192.168.10.46
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_path(write_config: Callable[[str], Path]) -> Path:
    return write_config(SAMPLE_CONFIG)

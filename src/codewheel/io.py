from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from .config import WheelConfig
from .symbols import SymbolTable


PathLike = Union[str, Path]


def load_symbols(path: PathLike) -> SymbolTable:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return SymbolTable.from_dict(data)


def save_symbols(table: SymbolTable, path: PathLike) -> None:
    Path(path).write_text(json.dumps(table.to_dict(), indent=2), encoding="utf-8")


def load_config(path: PathLike) -> WheelConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return WheelConfig.from_dict(data)


def save_config(config: WheelConfig, path: PathLike) -> None:
    Path(path).write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")

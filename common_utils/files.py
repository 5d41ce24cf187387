"""Thin file readers for text and JSON content."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from common_utils.errors import MissingFileError


class FileHandler:
    """Read a file resolved against *base_dir* (default: current directory).

        FileHandler("notes.txt").read()
        FileHandler("config.json").read_json(shape=AppConfig)
    """

    def __init__(self, file_path: str | os.PathLike[str], base_dir: str | os.PathLike[str] | None = None):
        self.path = (Path(base_dir) if base_dir is not None else Path.cwd()).joinpath(file_path).resolve()

    def read(self, encoding: str = "utf-8") -> str:
        return self.path.read_text(encoding=encoding)

    def read_json(self, shape: Any = None) -> Any:
        """Parse the file as JSON, validated against *shape* when given."""
        if not self.path.is_file():
            raise MissingFileError(str(self.path))
        text = self.read()
        if shape is None:
            return json.loads(text)
        return TypeAdapter(shape).validate_json(text)

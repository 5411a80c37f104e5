import tomllib
from pathlib import Path

def toml_to_dict(data: str) -> dict:
    return tomllib.loads(data)

def read_file_as_text(path: str | Path) -> str:
    file_path = Path(path)
    contents = file_path.read_text(encoding="utf-8")
    return contents

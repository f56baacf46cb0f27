import json
from dataclasses import asdict
from pathlib import Path

from wilayah.records import WilayahError


class EmitError(WilayahError):
    pass


def to_json(records) -> str:
    try:
        return json.dumps(
            [asdict(r) for r in records], ensure_ascii=False, indent=2
        )
    except (TypeError, ValueError) as e:
        raise EmitError(f"failed to marshal data to JSON: {e}") from e


def write_json(path: Path, records):
    text = to_json(records)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w", newline="", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        raise EmitError(f"failed to write file {path}: {e}") from e

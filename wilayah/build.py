#!/usr/bin/env python3

from dataclasses import dataclass
from pathlib import Path

from wilayah.emit import EmitError, write_json
from wilayah.index import build_indices
from wilayah.records import (
    WilayahError,
    read_districts,
    read_provinces,
    read_regencies,
    read_villages,
)

DATA_DIR = Path("data")
PROVINCES_CSV = DATA_DIR / "provinces.csv"
REGENCIES_CSV = DATA_DIR / "regencies.csv"
DISTRICTS_CSV = DATA_DIR / "districts.csv"
VILLAGES_CSV = DATA_DIR / "villages.csv"

API_DIR = Path("static") / "api"
PROVINCES_JSON = API_DIR / "provinces.json"
REGENCIES_DIR = API_DIR / "regencies"
DISTRICTS_DIR = API_DIR / "districts"
VILLAGES_DIR = API_DIR / "villages"


@dataclass(frozen=True)
class Summary:
    provinces: int
    regencies: int
    districts: int
    villages: int


def create_output_dirs(root: Path):
    for d in (API_DIR, REGENCIES_DIR, DISTRICTS_DIR, VILLAGES_DIR):
        try:
            (root / d).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise EmitError(f"failed to create directory {root / d}: {e}") from e


def build(root: Path = Path(".")) -> Summary:
    provinces = read_provinces(root / PROVINCES_CSV)
    regencies = read_regencies(root / REGENCIES_CSV)
    districts = read_districts(root / DISTRICTS_CSV)
    villages = read_villages(root / VILLAGES_CSV)

    indices = build_indices(regencies, districts, villages)

    create_output_dirs(root)

    write_json(root / PROVINCES_JSON, provinces)

    for prov in provinces:
        write_json(root / REGENCIES_DIR / f"{prov.id}.json", indices.regencies_of(prov.id))

    for reg in regencies:
        write_json(root / DISTRICTS_DIR / f"{reg.id}.json", indices.districts_of(reg.id))

    for dist in districts:
        write_json(root / VILLAGES_DIR / f"{dist.id}.json", indices.villages_of(dist.id))

    return Summary(
        provinces=len(provinces),
        regencies=len(regencies),
        districts=len(districts),
        villages=len(villages),
    )


def main():
    try:
        summary = build(Path("."))
    except WilayahError as e:
        raise SystemExit(f"error: {e}")

    print(f"wrote {PROVINCES_JSON} ({summary.provinces} provinces)")
    print(f"wrote {summary.provinces} files to {REGENCIES_DIR}")
    print(f"wrote {summary.regencies} files to {DISTRICTS_DIR}")
    print(f"wrote {summary.districts} files to {VILLAGES_DIR} ({summary.villages} villages)")
    print("All JSON files generated successfully!")


if __name__ == "__main__":
    main()

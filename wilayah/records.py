import csv
from dataclasses import dataclass, fields
from pathlib import Path


class WilayahError(Exception):
    pass


class ParseError(WilayahError):
    pass


@dataclass(frozen=True)
class Province:
    id: str
    name: str

    @property
    def parent_id(self):
        return None


@dataclass(frozen=True)
class Regency:
    id: str
    province_id: str
    name: str

    @property
    def parent_id(self):
        return self.province_id


@dataclass(frozen=True)
class District:
    id: str
    regency_id: str
    name: str

    @property
    def parent_id(self):
        return self.regency_id


@dataclass(frozen=True)
class Village:
    id: str
    district_id: str
    name: str

    @property
    def parent_id(self):
        return self.district_id


def has_bare_quote(raw: str) -> bool:
    """Report a ``"`` inside a field that does not open with a quote.

    csv.reader keeps such quotes as data even in strict mode.
    """
    quoted = False
    field_start = True
    i = 0

    while i < len(raw):
        c = raw[i]

        if field_start:
            field_start = False

            if c == '"':
                quoted = True
                i += 1
                continue

        if quoted:
            if c == '"':
                if raw[i + 1 : i + 2] == '"':
                    i += 2
                    continue

                quoted = False
        elif c == '"':
            return True
        elif c == ",":
            field_start = True

        i += 1

    return False


def read_records(path: Path, kind) -> list:
    """Parse a header-led CSV file into ``kind`` records, in file order.

    Columns are taken positionally in the field order of ``kind``; the header
    is skipped without checking names and extra trailing columns are ignored.
    Any unreadable file, missing header, malformed or short row raises
    ``ParseError``.
    """
    width = len(fields(kind))

    try:
        fh = path.open("r", newline="", encoding="utf-8")
    except OSError as e:
        raise ParseError(f"failed to open {path}: {e}") from e

    results = []
    consumed = []

    def tracked(lines):
        for line in lines:
            consumed.append(line)
            yield line

    def raw_record():
        raw = "".join(consumed)
        consumed.clear()
        return raw

    with fh:
        reader = csv.reader(tracked(fh), strict=True)

        try:
            if next(reader, None) is None:
                raise ParseError(f"failed to read header for {path}: file is empty")

            if has_bare_quote(raw_record()):
                raise ParseError(
                    f"failed to read header for {path}: bare \" in non-quoted field"
                )

            for row in reader:
                raw = raw_record()

                # blank lines are not records
                if not row:
                    continue

                if has_bare_quote(raw):
                    raise ParseError(
                        f"failed to read {path} record at line {reader.line_num}: "
                        f"bare \" in non-quoted field"
                    )

                if len(row) < width:
                    raise ParseError(
                        f"short record in {path} at line {reader.line_num}: "
                        f"expected {width} columns, got {len(row)}"
                    )

                results.append(kind(*(v.strip() for v in row[:width])))
        except (csv.Error, UnicodeDecodeError) as e:
            raise ParseError(
                f"failed to read {path} record at line {reader.line_num}: {e}"
            ) from e

    return results


def read_provinces(path: Path) -> list:
    return read_records(path, Province)


def read_regencies(path: Path) -> list:
    return read_records(path, Regency)


def read_districts(path: Path) -> list:
    return read_records(path, District)


def read_villages(path: Path) -> list:
    return read_records(path, Village)

from dataclasses import dataclass


def group_by_parent(records) -> dict:
    """Group records by ``parent_id``, keeping input order inside each group.

    Parents without children get no key at all.
    """
    groups = {}

    for record in records:
        groups.setdefault(record.parent_id, []).append(record)

    return groups


@dataclass(frozen=True)
class Indices:
    regencies_by_province: dict
    districts_by_regency: dict
    villages_by_district: dict

    def regencies_of(self, province_id: str) -> list:
        return self.regencies_by_province.get(province_id, [])

    def districts_of(self, regency_id: str) -> list:
        return self.districts_by_regency.get(regency_id, [])

    def villages_of(self, district_id: str) -> list:
        return self.villages_by_district.get(district_id, [])


def build_indices(regencies, districts, villages) -> Indices:
    return Indices(
        regencies_by_province=group_by_parent(regencies),
        districts_by_regency=group_by_parent(districts),
        villages_by_district=group_by_parent(villages),
    )

"""A fixed table of numbered, named records."""

from __future__ import annotations

from dataclasses import dataclass

TABLE_SIZE = 10
"""Number of records in a table."""

NAME_MAX = 20
"""Storage for a name, including its terminator."""

EMPTY_NUMBER = -1


@dataclass
class Record:
    """One table entry; a cleared record has number -1 and an empty name."""

    number: int = EMPTY_NUMBER
    name: str = ""


def _check_index(index: int) -> None:
    if not 0 <= index < TABLE_SIZE:
        raise IndexError(f"index {index} outside table of {TABLE_SIZE}")


class RecordTable:
    """Ten records addressed by position and searchable by number."""

    def __init__(self) -> None:
        self._records = [Record() for _ in range(TABLE_SIZE)]

    def clear_element(self, index: int) -> None:
        """Reset the record at ``index``."""
        _check_index(index)
        record = self._records[index]
        record.number = EMPTY_NUMBER
        record.name = ""

    def clear_all(self) -> None:
        """Reset every record."""
        for index in range(TABLE_SIZE):
            self.clear_element(index)

    def get_element(self, index: int) -> Record:
        """Return the record stored at ``index``."""
        _check_index(index)
        return self._records[index]

    def set_element(self, index: int, number: int, name: str) -> None:
        """Overwrite the record at ``index``."""
        _check_index(index)
        if len(name) >= NAME_MAX:
            raise ValueError(f"name {name!r} longer than {NAME_MAX - 1} characters")
        record = self._records[index]
        record.number = number
        record.name = name

    def search_element(self, number: int) -> Record | None:
        """Return the first record holding ``number``, or None."""
        return next((r for r in self._records if r.number == number), None)

    def __iter__(self):
        return iter(self._records)

    def __len__(self) -> int:
        return TABLE_SIZE


def main(argv: list[str] | None = None) -> int:
    """Fill a few records, list the table and look one up by number."""
    table = RecordTable()
    table.clear_all()
    for index, record in enumerate(table):
        print(f"{index} : number = {record.number} / name = {record.name}")
    print()

    table.set_element(0, 10, "taro")
    table.set_element(1, 11, "hanako")
    table.set_element(3, 20, "tama")
    for index, record in enumerate(table):
        print(f"{index} : number = {record.number} / name  {record.name}")
    print()

    found = table.search_element(11)
    if found is None:
        print("search_element : not found")
        return 1
    print(f"search_element : number = {found.number} / name = {found.name}")
    return 0
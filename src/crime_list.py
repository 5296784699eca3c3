from __future__ import annotations
from typing import Any, Iterator, List


class CrimeList:
    "Λίστα αποτελεσμάτων (payloads) με τη σειρά που βρέθηκαν, μόνο με προσθήκες."

    def __init__(self):
        self._crimes: List[Any] = []

    def add_crime(self, crime_data: Any) -> None:
        "Προσθέτει μια εγγραφή στο τέλος της λίστας."
        self._crimes.append(crime_data)

    def to_list(self) -> List[Any]:
        return list(self._crimes)

    def format_lines(self) -> List[str]:
        "Μία γραμμή ανά εγγραφή και στο τέλος το πλήθος."
        lines = [str(c) for c in self._crimes]
        lines.append(f"Found {len(self._crimes)} crimes.")
        return lines

    def __iter__(self) -> Iterator[Any]:
        return iter(self._crimes)

    def __len__(self) -> int:
        return len(self._crimes)

    def __getitem__(self, i: int) -> Any:
        return self._crimes[i]

    def __repr__(self) -> str:
        return f"CrimeList({self._crimes!r})"

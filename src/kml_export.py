from __future__ import annotations
from pathlib import Path
from typing import Iterable, List
from xml.sax.saxutils import escape

KML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<kml xmlns="http://earth.google.com/kml/2.2">\n'
    "<Document>\n"
)
KML_FOOTER = "</Document>\n</kml>"

#theseis stilon sto csv ton egklimaton
STREET_COL = 3
OFFENSE_COL = 4
LAT_COL = 7
LON_COL = 8


def escape_xml(text: str) -> str:
    "Escape των ειδικών χαρακτήρων XML (και των εισαγωγικών)."
    return escape(text, {'"': "&quot;", "'": "&apos;"})


def placemark(crime_data: str) -> str:
    "Ένα Placemark για μια γραμμή csv. ValueError αν η γραμμή δεν έχει έγκυρα lat/lon."
    parts = crime_data.split(",")
    if len(parts) <= LON_COL:
        raise ValueError(f"Too few columns in crime data: {crime_data}")

    lat = float(parts[LAT_COL])
    lon = float(parts[LON_COL])

    return (
        "  <Placemark>\n"
        f"    <name>{escape_xml(parts[OFFENSE_COL])}</name>\n"
        f"    <description>{escape_xml(parts[STREET_COL])}</description>\n"
        "    <Point>\n"
        f"      <coordinates>{lon},{lat},0</coordinates>\n"
        "    </Point>\n"
        "  </Placemark>\n"
    )


def write_kml(crimes: Iterable[str], filename: str | Path) -> int:
    "Γράφει τις εγγραφές σε αρχείο KML για το Google Earth και επιστρέφει πόσα Placemarks γράφτηκαν."
    blocks: List[str] = []
    for crime_data in crimes:
        try:
            blocks.append(placemark(crime_data))
        except ValueError:
            print(f"[KML] Skipping invalid crime data: {crime_data}")

    with open(filename, "w", encoding="utf-8") as f:
        f.write(KML_HEADER)
        f.writelines(blocks)
        f.write(KML_FOOTER)

    print(f"[KML] KML file successfully created: {filename} ({len(blocks)} placemarks)")
    return len(blocks)

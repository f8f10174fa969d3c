"""
Language-aware column name patterns.

Each field type has an ordered tuple of patterns per language, most specific first:
an earlier match yields a higher confidence. Patterns are matched against the leaf
name of a column path and are compiled once at import time.
"""
from __future__ import annotations

import re
from typing import Dict, Pattern, Tuple

PatternList = Tuple[Pattern[str], ...]

DEFAULT_LANGUAGE = "eng"
FIELD_TYPES = ("title", "description", "locationName", "timestamp", "location")


def _compile(*sources: str) -> PatternList:
    return tuple(re.compile(src, re.IGNORECASE) for src in sources)


FIELD_PATTERNS: Dict[str, Dict[str, PatternList]] = {
    "title": {
        "eng": _compile(r"^title$", r"^name$", r"^event.*name$", r"^event.*title$", r"^label$", r"^event$"),
        "deu": _compile(
            r"^titel$",
            r"^name$",
            r"^bezeichnung$",
            r"^veranstaltung.*name$",
            r"^veranstaltung.*titel$",
            r"^veranstaltung$",
        ),
        "fra": _compile(r"^titre$", r"^nom$", r"^événement.*nom$", r"^événement.*titre$", r"^intitulé$", r"^événement$"),
        "spa": _compile(r"^título$", r"^nombre$", r"^evento.*nombre$", r"^evento.*título$", r"^denominación$", r"^evento$"),
        "ita": _compile(r"^titolo$", r"^nome$", r"^evento.*nome$", r"^evento.*titolo$", r"^denominazione$", r"^evento$"),
        "nld": _compile(r"^titel$", r"^naam$", r"^evenement.*naam$", r"^evenement.*titel$", r"^benaming$", r"^evenement$"),
        "por": _compile(r"^título$", r"^nome$", r"^evento.*nome$", r"^evento.*título$", r"^denominação$", r"^evento$"),
    },
    "description": {
        "eng": _compile(
            r"^description$", r"^details$", r"^summary$", r"^notes$", r"^text$", r"^content$", r"^event.*description$"
        ),
        "deu": _compile(
            r"^beschreibung$",
            r"^details$",
            r"^zusammenfassung$",
            r"^notizen$",
            r"^text$",
            r"^inhalt$",
            r"^veranstaltung.*beschreibung$",
        ),
        "fra": _compile(
            r"^description$", r"^détails$", r"^résumé$", r"^notes$", r"^texte$", r"^contenu$", r"^événement.*description$"
        ),
        "spa": _compile(
            r"^descripción$", r"^detalles$", r"^resumen$", r"^notas$", r"^texto$", r"^contenido$", r"^evento.*descripción$"
        ),
        "ita": _compile(
            r"^descrizione$", r"^dettagli$", r"^sommario$", r"^note$", r"^testo$", r"^contenuto$", r"^evento.*descrizione$"
        ),
        "nld": _compile(
            r"^beschrijving$",
            r"^details$",
            r"^samenvatting$",
            r"^notities$",
            r"^tekst$",
            r"^inhoud$",
            r"^evenement.*beschrijving$",
        ),
        "por": _compile(
            r"^descrição$", r"^detalhes$", r"^resumo$", r"^notas$", r"^texto$", r"^conteúdo$", r"^evento.*descrição$"
        ),
    },
    "locationName": {
        "eng": _compile(
            r"^venue$",
            r"^venue.*name$",
            r"^place$",
            r"^place.*name$",
            r"^location$",
            r"^location.*name$",
            r"^site$",
            r"^spot$",
            r"^where$",
        ),
        "deu": _compile(
            r"^veranstaltungsort$", r"^ort$", r"^spielstätte$", r"^standort$", r"^platz$", r"^lokalität$", r"^wo$"
        ),
        "fra": _compile(r"^lieu$", r"^endroit$", r"^place$", r"^salle$", r"^site$", r"^où$"),
        "spa": _compile(r"^lugar$", r"^sitio$", r"^local$", r"^sede$", r"^recinto$", r"^donde$", r"^dónde$"),
        "ita": _compile(r"^luogo$", r"^posto$", r"^locale$", r"^sede$", r"^sito$", r"^dove$"),
        "nld": _compile(r"^locatie$", r"^plaats$", r"^plek$", r"^zaal$", r"^site$", r"^waar$"),
        "por": _compile(r"^local$", r"^lugar$", r"^recinto$", r"^sede$", r"^sítio$", r"^onde$"),
    },
    "timestamp": {
        "eng": _compile(
            r"^date$",
            r"^timestamp$",
            r"^datetime$",
            r"^date.*time$",
            r"^created.*at$",
            r"^event.*date$",
            r"^event.*time$",
            r"^time$",
            r"^when$",
        ),
        "deu": _compile(
            r"^datum$",
            r"^zeitstempel$",
            r"^erstellt.*am$",
            r"^veranstaltung.*datum$",
            r"^veranstaltung.*zeit$",
            r"^zeit$",
            r"^wann$",
        ),
        "fra": _compile(
            r"^date$", r"^horodatage$", r"^créé.*le$", r"^événement.*date$", r"^événement.*heure$", r"^heure$", r"^quand$"
        ),
        "spa": _compile(
            r"^fecha$", r"^timestamp$", r"^creado.*el$", r"^evento.*fecha$", r"^evento.*hora$", r"^hora$", r"^cuándo$"
        ),
        "ita": _compile(
            r"^data$", r"^timestamp$", r"^creato.*il$", r"^evento.*data$", r"^evento.*ora$", r"^ora$", r"^quando$"
        ),
        "nld": _compile(
            r"^datum$",
            r"^tijdstempel$",
            r"^gemaakt.*op$",
            r"^evenement.*datum$",
            r"^evenement.*tijd$",
            r"^tijd$",
            r"^wanneer$",
        ),
        "por": _compile(
            r"^data$", r"^timestamp$", r"^criado.*em$", r"^evento.*data$", r"^evento.*hora$", r"^hora$", r"^quando$"
        ),
    },
    # Textual address columns usable for geocoding
    "location": {
        "eng": _compile(
            r"^address$",
            r"^addr$",
            r"^location$",
            r"^place$",
            r"^venue$",
            r"^city$",
            r"^town$",
            r"^region$",
            r"^area$",
            r"^street$",
            r"^full.*address$",
            r"^event.*location$",
            r"^event.*address$",
            r"^postal.*address$",
        ),
        "deu": _compile(
            r"^adresse$",
            r"^ort$",
            r"^standort$",
            r"^platz$",
            r"^veranstaltungsort$",
            r"^stadt$",
            r"^region$",
            r"^straße$",
            r"^strasse$",
            r"^vollständige.*adresse$",
            r"^veranstaltung.*ort$",
            r"^veranstaltung.*adresse$",
            r"^postadresse$",
        ),
        "fra": _compile(
            r"^adresse$",
            r"^lieu$",
            r"^emplacement$",
            r"^place$",
            r"^salle$",
            r"^ville$",
            r"^région$",
            r"^rue$",
            r"^adresse.*complète$",
            r"^événement.*lieu$",
            r"^événement.*adresse$",
            r"^adresse.*postale$",
        ),
        "spa": _compile(
            r"^dirección$",
            r"^lugar$",
            r"^ubicación$",
            r"^sitio$",
            r"^local$",
            r"^ciudad$",
            r"^región$",
            r"^calle$",
            r"^dirección.*completa$",
            r"^evento.*lugar$",
            r"^evento.*dirección$",
            r"^dirección.*postal$",
        ),
        "ita": _compile(
            r"^indirizzo$",
            r"^luogo$",
            r"^posizione$",
            r"^posto$",
            r"^locale$",
            r"^città$",
            r"^regione$",
            r"^via$",
            r"^indirizzo.*completo$",
            r"^evento.*luogo$",
            r"^evento.*indirizzo$",
            r"^indirizzo.*postale$",
        ),
        "nld": _compile(
            r"^adres$",
            r"^locatie$",
            r"^plaats$",
            r"^plek$",
            r"^zaal$",
            r"^stad$",
            r"^regio$",
            r"^straat$",
            r"^volledig.*adres$",
            r"^evenement.*locatie$",
            r"^evenement.*adres$",
            r"^postadres$",
        ),
        "por": _compile(
            r"^endereço$",
            r"^local$",
            r"^localização$",
            r"^lugar$",
            r"^recinto$",
            r"^cidade$",
            r"^região$",
            r"^rua$",
            r"^endereço.*completo$",
            r"^evento.*local$",
            r"^evento.*endereço$",
            r"^endereço.*postal$",
        ),
    },
}

# Separators between name parts: underscore, space, hyphen, dot
LATITUDE_PATTERNS: PatternList = _compile(
    r"^lat(itude)?$",
    r"^lat[_\s.-]?deg(rees)?$",
    r"^lat(itude)?[_\s.-]?coord(inate)?$",
    r"^y[_\s.-]?coord(inate)?$",
    r"^location[_\s.-]?lat(itude)?$",
    r"^geo[_\s.-]?lat(itude)?$",
    r"^decimal[_\s.-]?lat(itude)?$",
    r"^latitude[_\s.-]?decimal$",
    r"^wgs84[_\s.-]?lat(itude)?$",
    r"^breite$",
    r"^breitengrad$",
)

LONGITUDE_PATTERNS: PatternList = _compile(
    r"^lon(g|gitude)?$",
    r"^lng$",
    r"^lon[_\s.-]?deg(rees)?$",
    r"^long[_\s.-]?deg(rees)?$",
    r"^(lon(g|gitude)?|lng)[_\s.-]?coord(inate)?$",
    r"^x[_\s.-]?coord(inate)?$",
    r"^location[_\s.-]?(lon(g|gitude)?|lng)$",
    r"^geo[_\s.-]?(lon(g|gitude)?|lng)$",
    r"^decimal[_\s.-]?lon(g|gitude)?$",
    r"^longitude[_\s.-]?decimal$",
    r"^wgs84[_\s.-]?lon(g|gitude)?$",
    r"^länge$",
    r"^laenge$",
    r"^längengrad$",
)

# Columns holding both coordinates in a single value
COMBINED_COORDINATE_PATTERNS: PatternList = _compile(
    r"^coord(inate)?s?$",
    r"^lat[_\s.-]?lon(g)?$",
    r"^location$",
    r"^geo[_\s.-]?location$",
    r"^position$",
    r"^point$",
    r"^geometry$",
    r"^geo$",
    r"^geolocation$",
    r"^geo[_\s.-]?point$",
    r"^latlng$",
    r"^lat[_\s.-]?lng$",
    r"^lnglat$",
    r"^lng[_\s.-]?lat$",
    r"^koordinaten$",
)

ADDRESS_PATTERNS: PatternList = _compile(r"^(address|addr|location|place|street|city|state|zip|postal|country)")

COORDINATE_BOUNDS: Dict[str, Dict[str, float]] = {
    "latitude": {"min": -90.0, "max": 90.0},
    "longitude": {"min": -180.0, "max": 180.0},
}


def get_patterns(field_type: str, language: str) -> PatternList:
    """Patterns for a field type in a language; unsupported languages use English."""
    by_language = FIELD_PATTERNS[field_type]
    return by_language.get(language, by_language[DEFAULT_LANGUAGE])


def match_index(name: str, patterns: PatternList) -> int:
    """Index of the first pattern matching `name`, or -1."""
    for i, pattern in enumerate(patterns):
        if pattern.search(name):
            return i
    return -1


def pattern_confidence(index: int, pattern_count: int) -> float:
    """0.5 for a match on the last pattern, approaching 1.0 for the first."""
    return 0.5 + 0.5 * (1 - index / pattern_count)

"""
Parsing des champs textuels extraits des pages IMDb.

Toutes les fonctions publiques sont totales : un texte absent ou mal forme
donne None (ou une valeur vide), jamais une exception. Les echecs internes
sont signales par ParseError puis convertis en valeur absente par le
decorateur absent_on_error.

Formats geres:
- Durees ISO 8601 du JSON-LD ("PT2H22M")
- Durees de la meta description ("2h 22m | ...")
- Annee du <title> ("Breaking Bad (TV Series 2008–2013) - IMDb")
- Notes avec virgule ou point ("8,5")
- Titres classes des resultats de recherche ("1. Inception")
- Libelles d'episodes ("S1.E1 ∙ Pilot")
- Dates de diffusion localisees ("Sun, Jan 20, 2008", "dim. 20 janv. 2008")
"""

import re
from datetime import date
from functools import lru_cache, wraps
from typing import Any, Callable, Iterable, Optional, TypeVar

from babel.core import UnknownLocaleError
from babel.dates import get_month_names
from loguru import logger

from src.core.exceptions import ParseError

T = TypeVar("T")

DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
DESCRIPTION_RUNTIME_RE = re.compile(r"(?:(\d+)(?:h|hours))?\s?(?:(\d+)(?:m|minutes))?\s\|")
TITLE_YEAR_RE = re.compile(r"\((\d{4})\)|\([^0-9]+ (\d{4})–?")
RANK_PREFIX_RE = re.compile(r"^\d+\.\s")
EPISODE_NUMBER_RE = re.compile(r"S\d+.E(\d+)")
EPISODE_TITLE_RE = re.compile(r"S\d+.E\d+\s?∙(.*)")
IMDB_ID_RE = re.compile(r"tt\d+")
YEAR_BADGE_RE = re.compile(r"^(\d{4})(?:[-–]\s?(?:\d{4})?)?")
FIRST_INT_RE = re.compile(r"\d+")
ISO_PARTIAL_DATE_RE = re.compile(r"^(\d{4})(?:-\d{2})?$")

DEFAULT_DATE_LOCALE = "en"

# Formats de date des listes d'episodes, par langue
# en : "Weekday, Month Day, Year"  -> "Sun, Jan 20, 2008"
# fr : "Weekday, Day Month Year"   -> "dim. 20 janv. 2008"
DATE_FORMATS: dict[str, re.Pattern[str]] = {
    "en": re.compile(
        r"^(?:(?P<weekday>[^\W\d_]+)\.?,\s*)?"
        r"(?P<month>[^\W\d_]+)\.?\s+(?P<day>\d{1,2}),?\s+(?P<year>\d{4})$"
    ),
    "fr": re.compile(
        r"^(?:(?P<weekday>[^\W\d_]+)\.?,?\s+)?"
        r"(?P<day>\d{1,2})(?:er)?\s+(?P<month>[^\W\d_]+)\.?\s+(?P<year>\d{4})$"
    ),
}


def absent_on_error(func: Callable[..., Optional[T]]) -> Callable[..., Optional[T]]:
    """Convertit ParseError/ValueError en valeur absente (None)."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[T]:
        try:
            return func(*args, **kwargs)
        except (ParseError, ValueError, TypeError) as e:
            logger.debug("Champ ignore", parser=func.__name__, error=str(e))
            return None

    return wrapper


def _to_int(value: Optional[str]) -> int:
    return int(value) if value else 0


@absent_on_error
def parse_duration(token: Optional[str]) -> Optional[int]:
    """
    Convertit une duree ISO 8601 ("PT2H22M") en secondes.

    "PT" seul donne 0; un jeton sans "PT" donne None.
    """
    if not token:
        return None
    match = DURATION_RE.search(token)
    if match is None:
        raise ParseError(f"Not a duration: {token!r}")
    return _to_int(match.group(1)) * 3600 + _to_int(match.group(2)) * 60


@absent_on_error
def parse_description_runtime(description: Optional[str]) -> Optional[int]:
    """
    Extrait la duree d'une meta description ("2h 22m | Drama").

    Le segment heures/minutes doit etre suivi d'un separateur "|".
    """
    if not description:
        return None
    match = DESCRIPTION_RUNTIME_RE.search(description)
    if match is None:
        raise ParseError(f"No runtime segment: {description!r}")
    return _to_int(match.group(1)) * 3600 + _to_int(match.group(2)) * 60


def parse_title_year(page_title: Optional[str]) -> Optional[int]:
    """
    Extrait l'annee de sortie du <title> d'une page.

    Gere "(1994)" comme "(TV Series 2008–2013)". La DERNIERE occurrence est
    retenue : un titre peut commencer par une annee de desambiguisation.
    """
    if not page_title:
        return None
    matches = TITLE_YEAR_RE.findall(page_title)
    if not matches:
        return None
    single, ranged = matches[-1]
    return int(single or ranged)


@absent_on_error
def parse_iso_year(value: Optional[str]) -> Optional[int]:
    """
    Annee d'une date ISO du JSON-LD.

    La precision varie selon le titre : "2008-01-20", "2008-01" ou "2008".
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10]).year
    except ValueError:
        match = ISO_PARTIAL_DATE_RE.match(value.strip())
        if match is None:
            raise ParseError(f"Not an ISO date: {value!r}")
        return int(match.group(1))


@absent_on_error
def parse_rating(raw: Any) -> Optional[float]:
    """
    Convertit une note ("8,5", "8.5", 9.3) en float dans [0, 10].

    Returns:
        La note, ou None si absente, illisible ou hors intervalle
    """
    if raw is None or raw == "":
        return None
    rating = float(str(raw).strip().replace(",", "."))
    if not 0 <= rating <= 10:
        raise ParseError(f"Rating out of range: {rating}")
    return rating


def strip_rank(title: Optional[str]) -> str:
    """Retire le rang ("12. ") des titres de resultats de recherche."""
    if not title:
        return ""
    return RANK_PREFIX_RE.sub("", title.strip())


def parse_episode_label(label: Optional[str]) -> tuple[Optional[int], str]:
    """
    Decoupe un libelle "S1.E7 ∙ Titre" en (7, "Titre").

    Returns:
        (numero d'episode ou None, titre ou "")
    """
    if not label:
        return None, ""
    number_match = EPISODE_NUMBER_RE.search(label)
    title_match = EPISODE_TITLE_RE.search(label)
    number = int(number_match.group(1)) if number_match else None
    title = title_match.group(1).strip() if title_match else ""
    return number, title


def parse_imdb_id(href: Optional[str]) -> Optional[str]:
    """Extrait l'ID IMDb ("tt0111161") d'un lien."""
    if not href:
        return None
    match = IMDB_ID_RE.search(href)
    return match.group(0) if match else None


def parse_year_badges(badges: Iterable[str]) -> Optional[int]:
    """
    Premiere annee trouvee parmi les badges de metadonnees d'un resultat.

    Accepte "2010", "2008–2013" et "2019– " (serie en cours).
    """
    for badge in badges:
        match = YEAR_BADGE_RE.match((badge or "").strip())
        if match:
            return int(match.group(1))
    return None


def parse_season_count(label: Optional[str]) -> int:
    """Nombre de saisons d'un libelle ("2 seasons"); 1 par defaut."""
    match = FIRST_INT_RE.search(label or "")
    return int(match.group(0)) if match else 1


def parse_keywords(raw: Optional[str]) -> tuple[str, ...]:
    """Mots-cles separes par des virgules, sans doublons, ordre conserve."""
    if not raw:
        return ()
    keywords = (keyword.strip() for keyword in raw.split(","))
    return tuple(dict.fromkeys(keyword for keyword in keywords if keyword))


def parse_genres(raw: Any) -> tuple[str, ...]:
    """Genres du JSON-LD (chaine unique ou liste)."""
    if not raw:
        return ()
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(genre) for genre in raw if genre)


@lru_cache(maxsize=16)
def _month_lookup(locale: str) -> dict[str, int]:
    """Noms de mois (abreges et complets) CLDR -> numero de mois."""
    try:
        widths = [get_month_names(width, locale=locale) for width in ("abbreviated", "wide")]
    except (UnknownLocaleError, ValueError):
        return _month_lookup(DEFAULT_DATE_LOCALE)
    lookup: dict[str, int] = {}
    for names in widths:
        for number, name in names.items():
            lookup[_normalize_token(name)] = number
    return lookup


def _normalize_token(token: str) -> str:
    return token.strip().rstrip(".").lower()


@absent_on_error
def parse_release_date(raw: Optional[str], locale: str) -> Optional[date]:
    """
    Parse une date de diffusion selon le format de la langue.

    Les langues sans format dedie utilisent le format anglais; les noms de
    mois restent ceux de la langue demandee quand Babel la connait.

    Args:
        raw: Texte brut ("Sun, Jan 20, 2008")
        locale: Code langue ("en", "fr"...)

    Returns:
        La date, ou None si le texte ne correspond pas au format
    """
    if not raw:
        return None
    text = " ".join(raw.split())
    pattern = DATE_FORMATS.get(locale, DATE_FORMATS[DEFAULT_DATE_LOCALE])
    match = pattern.match(text)
    if match is None:
        raise ParseError(f"Date {text!r} does not match the {locale!r} format")
    month = _month_lookup(locale).get(_normalize_token(match.group("month")))
    if month is None:
        raise ParseError(f"Unknown month {match.group('month')!r} for {locale!r}")
    return date(int(match.group("year")), month, int(match.group("day")))

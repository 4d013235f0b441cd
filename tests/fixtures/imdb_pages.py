"""
Extraits realistes des pages IMDb pour les tests.

Contient le JSON-LD des pages titre, les <title> et meta descriptions,
ainsi que les entrees brutes retournees par les scripts de lecture des
listes d'episodes et de resultats de recherche.
"""

import json

# GET /title/tt0111161
SHAWSHANK_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "Movie",
    "url": "https://www.imdb.com/title/tt0111161/",
    "name": "The Shawshank Redemption",
    "image": "https://m.media-amazon.com/images/M/MV5BNDE3ODcxYzMtY2YzZC00NmNlLWJiNDMtZDViZWM2MzIxZDYwXkEyXkFqcGdeQXVyNjAwNDUxODI@._V1_.jpg",
    "description": "Over the course of several years, two convicts form a friendship, seeking consolation and, eventually, redemption through basic compassion.",
    "aggregateRating": {
        "@type": "AggregateRating",
        "ratingCount": 2900000,
        "bestRating": 10,
        "worstRating": 1,
        "ratingValue": 9.3,
    },
    "contentRating": "R",
    "genre": ["Drama"],
    "datePublished": "1994-10-14",
    "keywords": "prison,wrongful imprisonment,based on the works of stephen king,prisoner,prison escape",
    "duration": "PT2H22M",
}
SHAWSHANK_TITLE = "The Shawshank Redemption (1994) - IMDb"
SHAWSHANK_DESCRIPTION = "2h 22m | R"

# GET /fr/title/tt0111161 : titre localise dans alternateName
SHAWSHANK_JSON_LD_FR = {
    **SHAWSHANK_JSON_LD,
    "alternateName": "Les évadés",
    "description": "Deux prisonniers nouent une amitié au fil des années.",
}
SHAWSHANK_TITLE_FR = "Les évadés (1994) - IMDb"

# GET /title/tt0903747
BREAKING_BAD_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "TVSeries",
    "url": "https://www.imdb.com/title/tt0903747/",
    "name": "Breaking Bad",
    "image": "https://m.media-amazon.com/images/M/MV5BYmQ4YWMxYjUtNjZmYi00MDQ1LWFjMjMtNjA5ZDdiYjdiODU5XkEyXkFqcGdeQXVyMTMzNDExODE5._V1_.jpg",
    "description": "A chemistry teacher diagnosed with inoperable lung cancer turns to manufacturing and selling methamphetamine.",
    "aggregateRating": {"@type": "AggregateRating", "ratingValue": 9.5},
    "genre": ["Crime", "Drama", "Thriller"],
    "datePublished": "2008-01-20",
    "keywords": "drug dealer,cancer,methamphetamine,drug dealer",
}
BREAKING_BAD_TITLE = "Breaking Bad (TV Series 2008–2013) - IMDb"
BREAKING_BAD_DESCRIPTION = "49m | TV-MA"
BREAKING_BAD_SEASONS_LABEL = "5 seasons"

# GET /title/tt0959621 (Breaking Bad S1.E1)
PILOT_JSON_LD = {
    "@context": "https://schema.org",
    "@type": "TVEpisode",
    "url": "https://www.imdb.com/title/tt0959621/",
    "name": "Pilot",
    "description": "A high school chemistry teacher dying of cancer teams with a former student.",
    "aggregateRating": {"@type": "AggregateRating", "ratingValue": 9.0},
    "genre": ["Crime", "Drama", "Thriller"],
    "datePublished": "2008-01-20",
    "timeRequired": "PT58M",
}
PILOT_TITLE = '"Breaking Bad" Pilot (TV Episode 2008) - IMDb'


def json_ld(data: dict) -> str:
    """Contenu texte du bloc <script type="application/ld+json">."""
    return json.dumps(data, ensure_ascii=False)


# Entrees brutes de la liste d'episodes (/title/tt0903747/episodes?season=N)
BREAKING_BAD_SEASON_1 = [
    {
        "posterUrl": "https://m.media-amazon.com/images/M/pilot.jpg",
        "label": "S1.E1 ∙ Pilot",
        "href": "/title/tt0959621/?ref_=ttep_ep1",
        "release": "Sun, Jan 20, 2008",
        "synopsis": "A high school chemistry teacher dying of cancer teams with a former student.",
        "rating": "9.0",
    },
    {
        "posterUrl": "https://m.media-amazon.com/images/M/cat.jpg",
        "label": "S1.E2 ∙ Cat's in the Bag...",
        "href": "/title/tt1054724/?ref_=ttep_ep2",
        "release": "Sun, Jan 27, 2008",
        "synopsis": "Walt and Jesse attempt to tie up loose ends.",
        "rating": "8.6",
    },
]
BREAKING_BAD_SEASON_2 = [
    {
        "posterUrl": None,
        "label": "S2.E1 ∙ Seven Thirty-Seven",
        "href": "/title/tt1232244/?ref_=ttep_ep1",
        "release": "Sun, Mar 8, 2009",
        "synopsis": "Walt and Jesse realize how dire their situation is.",
        "rating": "8.7",
    },
]

# Meme episode, page francaise
PILOT_FR = {
    "posterUrl": None,
    "label": "S1.E1 ∙ Chute libre",
    "href": "/fr/title/tt0959621/?ref_=ttep_ep1",
    "release": "dim. 20 janv. 2008",
    "synopsis": "Un professeur de chimie atteint d'un cancer s'associe a un ancien eleve.",
    "rating": "9,0",
}

# Entrees brutes de /search/title/?title=Inception
INCEPTION_SEARCH_RESULTS = [
    {
        "posterUrl": "https://m.media-amazon.com/images/M/inception.jpg",
        "title": "1. Inception",
        "href": "/title/tt1375666/?ref_=sr_t_1",
        "type": None,
        "metadata": ["2010", "2h 28m", "PG-13"],
        "rating": "8.8",
    },
    {
        "posterUrl": None,
        "title": "2. Inception: The Cobol Job",
        "href": "/title/tt5295894/?ref_=sr_t_2",
        "type": "Video",
        "metadata": ["2010", "14m"],
        "rating": "7.3",
    },
    {
        "posterUrl": None,
        "title": "3. The Inception of Breaking Bad",
        "href": "/title/tt9999999/?ref_=sr_t_3",
        "type": "TV Mini Series",
        "metadata": ["2019– ", "TV-14"],
        "rating": None,
    },
]

# Entree sans lien exploitable (bandeau publicitaire insere dans la liste)
MALFORMED_SEARCH_RESULT = {
    "posterUrl": None,
    "title": "Sponsored",
    "href": "https://pubads.example/click",
    "type": None,
    "metadata": [],
    "rating": None,
}

"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ContentType : Type de contenu IMDb (MOVIE, TV_SERIES, TV_EPISODE, UNKNOWN)
- classify : Conversion d'un libelle libre en ContentType
"""

from src.core.value_objects.content_type import ContentType, classify

__all__ = [
    "ContentType",
    "classify",
]

"""
Interface port pour l'extraction de metadonnees.

Contrat consomme par l'API HTTP et la CLI. L'implementation (adaptateur)
pilote un navigateur headless contre IMDb.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.media import EpisodeRecord, SearchResultRecord, TitleRecord
from src.core.value_objects.content_type import ContentType


class IMediaScraper(ABC):
    """
    Interface d'extraction de titres, episodes et resultats de recherche.

    Aucune methode ne leve d'exception pour un echec d'extraction :
    un titre introuvable donne None, une recherche en echec une liste vide.
    """

    @abstractmethod
    async def find_title(
        self,
        imdb_id: str,
        language: str,
        include_episodes: bool = False,
        timeout: Optional[float] = None,
    ) -> Optional[TitleRecord]:
        """
        Extrait un titre par son ID IMDb.

        Args :
            imdb_id : ID IMDb (ex: "tt0111161")
            language : Code langue (ex: "en", "fr")
            include_episodes : Extraire aussi les episodes (series uniquement)
            timeout : Echeance en secondes (None = configuration)

        Retourne :
            Le titre, ou None si l'extraction a echoue
        """
        ...

    @abstractmethod
    async def find_episodes(
        self,
        imdb_id: str,
        language: str,
        timeout: Optional[float] = None,
    ) -> Optional[list[EpisodeRecord]]:
        """
        Extrait tous les episodes d'une serie, saison par saison.

        Retourne :
            Les episodes, ou None si l'extraction a echoue
        """
        ...

    @abstractmethod
    async def search(
        self,
        query: str,
        language: str,
        content_type: Optional[ContentType] = None,
        year: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> list[SearchResultRecord]:
        """
        Recherche des titres.

        Args :
            query : Titre recherche
            language : Code langue
            content_type : Filtre optionnel par type
            year : Filtre optionnel par annee de sortie

        Retourne :
            Les resultats dans l'ordre du site (vide en cas d'echec)
        """
        ...

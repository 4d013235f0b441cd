"""
IMDb Scraper - Extraction de metadonnees films et series depuis IMDb.

Ce package pilote un navigateur headless (Playwright) pour extraire les
titres, episodes et resultats de recherche d'IMDb, et les convertit en
entites du domaine stables.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- adapters/ : Couche infrastructure (navigateur, extracteurs IMDb)
- web/ : API HTTP (FastAPI)
- main.py : Point d'entree CLI (Typer)
"""

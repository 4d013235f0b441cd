"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- browser/ : Cycle de vie du navigateur headless et navigation
- imdb/ : Extraction des pages IMDb (titres, saisons, recherche)
- cli/ : Commandes Typer d'extraction ponctuelle

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

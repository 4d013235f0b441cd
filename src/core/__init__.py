"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(navigateur, frameworks web).

Sous-packages :
- entities/ : Entités métier (TitleRecord, EpisodeRecord, SearchResultRecord)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ContentType)
"""

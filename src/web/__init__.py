"""Interface web (FastAPI) de l'API IMDb."""

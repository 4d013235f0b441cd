"""
Selecteurs CSS et scripts de lecture DOM des pages IMDb.

Toute la dependance au format (non versionne) du site est regroupee ici :
une evolution du site ne doit modifier que ce module.

Les scripts ne font que lire du texte brut; tout le parsing est fait cote
Python dans field_parsers.
"""

# Page titre
JSON_LD = 'script[type="application/ld+json"]'
OG_DESCRIPTION = 'meta[property="og:description"]'
SEASON_SELECT = "select#browse-episodes-season"

# Page episodes
SERIES_SUBTITLE = 'hgroup h2[data-testid="subtitle"]'
SEASON_TAB = 'a[data-testid="tab-season-entry"]'
EPISODE_ITEM = "article.episode-item-wrapper"

# Page recherche
SEARCH_ITEM = ".ipc-metadata-list-summary-item"

READ_TEXT = "el => el.textContent"
READ_CONTENT = 'el => el.getAttribute("content")'
READ_ARIA_LABEL = 'el => el.getAttribute("aria-label")'

READ_EPISODES = """
items => items.map(el => {
    const text = sel => el.querySelector(sel)?.textContent?.trim() ?? null;
    const link = el.querySelector("a.ipc-title-link-wrapper");
    return {
        posterUrl: el.querySelector("img.ipc-image")?.getAttribute("src")?.trim() ?? null,
        label: link?.textContent?.trim() ?? "",
        href: link?.getAttribute("href")?.trim() ?? null,
        release: text('h4[data-testid="slate-list-card-title"] + span'),
        synopsis: text('div.ipc-html-content-inner-div[role="presentation"]'),
        rating: text("span.ipc-rating-star--rating"),
    };
})
"""

READ_SEARCH_RESULTS = """
items => items.map(el => {
    const text = sel => el.querySelector(sel)?.textContent?.trim() ?? null;
    return {
        posterUrl: el.querySelector("img.ipc-image")?.getAttribute("src")?.trim() ?? null,
        title: text("h3.ipc-title__text") ?? "",
        href: el.querySelector("a.ipc-title-link-wrapper")?.getAttribute("href")?.trim() ?? null,
        type: text("span.dli-title-type-data"),
        metadata: [...el.querySelectorAll("span.dli-title-metadata-item")]
            .map(item => item.textContent?.trim() ?? ""),
        rating: text("span.ipc-rating-star--rating"),
    };
})
"""

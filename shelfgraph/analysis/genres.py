"""Genre taxonomy and inference from tags, titles, notes and publication year."""

from typing import NamedTuple

from shelfgraph.domain.book import BookNode

UNCATEGORIZED = "Uncategorized"


class Genre(NamedTuple):
    id: str
    name: str
    keywords: tuple[str, ...]
    start_year: int
    peak_year: int
    end_year: int | None = None


GENRES: tuple[Genre, ...] = (
    Genre(
        "hard_sf",
        "Hard SF",
        ("hard sf", "hard science", "physics", "engineering", "technical"),
        1940,
        1980,
    ),
    Genre(
        "space_opera",
        "Space Opera",
        ("space opera", "space empire", "galactic", "interstellar", "space fleet"),
        1920,
        1950,
    ),
    Genre(
        "cyberpunk",
        "Cyberpunk",
        ("cyberpunk", "hacker", "neural", "cyber", "megacorp", "dystopia"),
        1980,
        1995,
    ),
    Genre(
        "post_cyberpunk",
        "Post-Cyberpunk",
        ("transhumanism", "singularity", "augmentation", "post-human"),
        1998,
        2010,
    ),
    Genre(
        "new_wave",
        "New Wave",
        ("new wave", "experimental", "psychological", "literary"),
        1960,
        1968,
        1980,
    ),
    Genre("military_sf", "Military SF", ("military", "combat", "soldier", "tactical"), 1959, 1990),
    Genre(
        "biopunk",
        "Biopunk",
        ("biopunk", "genetic", "biotech", "clone", "mutation", "dna"),
        1990,
        2010,
    ),
    Genre(
        "climate_fiction",
        "Climate Fiction",
        ("climate", "environment", "ecology", "greenhouse"),
        2000,
        2020,
    ),
    Genre(
        "time_travel",
        "Time Travel",
        ("time travel", "temporal", "paradox", "time machine", "causality"),
        1895,
        1960,
    ),
    Genre(
        "post_apocalyptic",
        "Post-Apocalyptic",
        ("apocalypse", "wasteland", "survival", "collapse", "nuclear"),
        1950,
        2015,
    ),
    Genre(
        "first_contact",
        "First Contact",
        ("first contact", "alien", "xenobiology", "extraterrestrial"),
        1950,
        1980,
    ),
    Genre(
        "solarpunk",
        "Solarpunk",
        ("solarpunk", "solar", "sustainable", "renewable", "hopeful"),
        2010,
        2020,
    ),
    Genre(
        "virtual_reality",
        "Virtual Reality",
        ("virtual reality", "simulation", "matrix"),
        1992,
        2015,
    ),
)

# A genre needs at least this score to be assigned.
MIN_GENRE_SCORE = 2.0
TAG_MATCH_SCORE = 3.0
TEXT_MATCH_SCORE = 1.0
YEAR_BONUSES = (2.0, 1.0, 0.5)


def genres_for_year(year: int) -> list[Genre]:
    """Genres active in a year, closest peak first."""
    active = [
        genre
        for genre in GENRES
        if genre.start_year <= year and (genre.end_year is None or year <= genre.end_year)
    ]
    return sorted(active, key=lambda genre: abs(genre.peak_year - year))


def score_genres(node: BookNode) -> dict[str, float]:
    """Score every genre for a book; tags weigh most, then era, then title and notes."""
    scores = {genre.id: 0.0 for genre in GENRES}
    tags = [tag.lower() for tag in node.tags]
    text = f"{node.title} {node.notes}".lower()

    for genre in GENRES:
        for keyword in genre.keywords:
            if any(keyword in tag for tag in tags):
                scores[genre.id] += TAG_MATCH_SCORE
            if keyword in text:
                scores[genre.id] += TEXT_MATCH_SCORE

    if node.publication_year is not None:
        for genre, bonus in zip(genres_for_year(node.publication_year), YEAR_BONUSES):
            scores[genre.id] += bonus

    return scores


def infer_genre(node: BookNode) -> str:
    """Infer the primary genre name of a book.

    Falls back to the book's first tag, then to ``Uncategorized``.
    """
    scores = score_genres(node)
    best = max(GENRES, key=lambda genre: scores[genre.id])  # first genre wins ties
    if scores[best.id] >= MIN_GENRE_SCORE:
        return best.name
    if node.tags:
        return node.tags[0]
    return UNCATEGORIZED


def genre_for_tag(tag: str) -> Genre | None:
    """Return the genre a single tag names or implies, if any."""
    lowered = tag.lower()
    for genre in GENRES:
        if lowered == genre.name.lower() or any(keyword in lowered for keyword in genre.keywords):
            return genre
    return None

"""
Fuzzy string matching utilities for ingredient and style names.

Uses RapidFuzz for fast, accurate fuzzy matching with support for
ingredient name normalisation and alias resolution.
"""

from typing import Callable, TypeVar

from rapidfuzz import fuzz, process


T = TypeVar("T")


def match_string(
    query: str,
    candidates: list[str],
    threshold: float = 0.7,
    limit: int = 5,
) -> list[tuple[str, float]]:
    """
    Match a query string against candidates using fuzzy matching.

    Uses token_sort_ratio which handles word order variations well,
    making it suitable for names like "Crystal 60L" vs "60L Crystal".

    Args:
        query: The string to search for
        candidates: List of strings to match against
        threshold: Minimum match score (0.0 to 1.0), default 0.7
        limit: Maximum number of results to return

    Returns:
        List of (match, confidence) tuples above threshold, sorted by confidence

    Example:
        >>> match_string("casade", ["Cascade", "Centennial", "Citra"])
        [("Cascade", 0.92)]
    """
    if not candidates:
        return []

    if not query or not query.strip():
        return []

    results = process.extract(
        query,
        candidates,
        scorer=fuzz.token_sort_ratio,
        processor=str.lower,
        limit=limit,
    )

    # Convert scores from 0-100 to 0-1 and filter by threshold
    return [
        (match, score / 100)
        for match, score, _ in results
        if score / 100 >= threshold
    ]


def match_objects(
    query: str,
    candidates: list[T],
    key: Callable[[T], str],
    threshold: float = 0.7,
    limit: int = 5,
) -> list[tuple[T, float]]:
    """
    Match a query string against objects using a key function.

    Objects sharing the same key are all returned, in their original order.

    Args:
        query: The string to search for
        candidates: List of objects to match against
        key: Function to extract the string to match from each object
        threshold: Minimum match score (0.0 to 1.0)
        limit: Maximum number of results to return

    Returns:
        List of (object, confidence) tuples above threshold
    """
    if not candidates:
        return []

    if not query or not query.strip():
        return []

    string_to_objs: dict[str, list[T]] = {}
    for obj in candidates:
        string_to_objs.setdefault(key(obj), []).append(obj)

    string_matches = match_string(
        query,
        list(string_to_objs.keys()),
        threshold,
        limit,
    )

    results: list[tuple[T, float]] = []
    for match_str, confidence in string_matches:
        for obj in string_to_objs[match_str]:
            results.append((obj, confidence))
            if len(results) >= limit:
                return results

    return results


def best_match(
    query: str,
    candidates: list[str],
    threshold: float = 0.7,
) -> tuple[str, float] | None:
    """
    Get the single best match above threshold.

    Returns:
        (match, confidence) tuple or None if no match above threshold
    """
    matches = match_string(query, candidates, threshold, limit=1)
    return matches[0] if matches else None


# Common ingredient name aliases, keyed by catalog name (lower case)
INGREDIENT_ALIASES: dict[str, list[str]] = {
    # Malts
    "2-row pale malt": ["2-row", "two-row", "2 row", "american 2-row", "us 2-row"],
    "pilsner malt": ["pils", "pilsner", "pilsen", "pils malt", "german pilsner"],
    "munich malt": ["munich", "munchner", "münchner", "munich i"],
    "vienna malt": ["vienna", "wiener"],
    "maris otter": ["maris otter pale", "mo", "marris otter"],
    "caramel/crystal 60l": ["crystal 60", "caramel 60", "c60", "crystal 60l"],
    "caramel/crystal 40l": ["crystal 40", "caramel 40", "c40", "crystal 40l"],
    "caramel/crystal 20l": ["crystal 20", "caramel 20", "c20", "crystal 20l"],
    "chocolate malt": ["chocolate", "choc malt"],
    "black patent malt": ["black patent", "black malt"],
    "roasted barley": ["roast barley"],
    "wheat malt": ["malted wheat", "white wheat"],
    "flaked oats": ["oat flakes", "rolled oats"],

    # Hops
    "cascade": ["cascade hops", "cascade (us)", "us cascade"],
    "centennial": ["centennial hops", "centennial (us)"],
    "citra": ["citra hops", "citra (us)"],
    "mosaic": ["mosaic hops", "mosaic (us)"],
    "amarillo": ["amarillo hops", "amarillo (us)"],
    "hallertau mittelfrüh": ["hallertau", "hallertauer", "hallertauer mittelfruh"],
    "east kent goldings": ["ekg", "kent goldings", "goldings"],
    "fuggle": ["fuggles", "fuggle hops"],
    "mount hood": ["mt. hood", "mt hood"],

    # Yeasts
    "us-05 american ale": ["us-05", "us05", "safale us-05", "fermentis us-05"],
    "s-04 english ale": ["s-04", "s04", "safale s-04"],
    "saflager w-34/70": ["w-34/70", "w34/70", "34/70"],
    "wlp001 california ale": ["wlp001", "california ale"],
    "wyeast 1056 american ale": ["wyeast 1056", "1056"],
    "nottingham ale yeast": ["nottingham", "danstar nottingham", "lallemand nottingham"],

    # Adjuncts
    "irish moss": ["carrageenan"],
    "whirlfloc tablet": ["whirlfloc"],
    "gypsum (calcium sulfate)": ["gypsum", "calcium sulfate", "caso4"],
    "calcium chloride": ["cacl2"],
    "corn sugar (dextrose)": ["dextrose", "corn sugar"],
}


def normalise_ingredient_name(name: str) -> str:
    """
    Normalise an ingredient name to a canonical form.

    Known aliases resolve to the catalog name; anything else is lower-cased
    and stripped.

    Example:
        >>> normalise_ingredient_name("Safale US-05")
        "us-05 american ale"
        >>> normalise_ingredient_name("  Cascade  ")
        "cascade"
    """
    name_lower = name.lower().strip()

    if name_lower in INGREDIENT_ALIASES:
        return name_lower

    for canonical, aliases in INGREDIENT_ALIASES.items():
        if name_lower in (a.lower() for a in aliases):
            return canonical

    return name_lower

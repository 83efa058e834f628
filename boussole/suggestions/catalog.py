"""Curated suggestion catalogs for professional interests and key motivations.

Both catalogs are embedded here so that template generation and the
suggestion pickers work without any data loading.  Order is curation order;
it only matters as the stable universe the template generator shuffles.

Matching is case- and accent-insensitive via :func:`normalize`, and search
is a plain substring test (no prefix or fuzzy matching).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from boussole.suggestions.normalizer import normalize

logger = logging.getLogger("boussole.suggestions.catalog")

# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

INTEREST_SUGGESTIONS: tuple[str, ...] = (
    "Management",
    "Innovation",
    "Relationnel",
    "Technique",
    "Créativité",
    "Autonomie",
    "Stabilité",
    "Équipe",
    "Formation",
    "Développement",
    "Communication",
    "Organisation",
    "Stratégie",
    "Analyse",
    "Résolution de problèmes",
    "Leadership",
    "Négociation",
    "Planification",
    "Recherche",
    "Conception",
    "Réalisation",
    "Contrôle qualité",
    "Gestion de projet",
    "Veille technologique",
    "Mentorat",
    "Commercial",
    "Marketing",
    "Finance",
    "Ressources humaines",
    "International",
)

MOTIVATION_SUGGESTIONS: tuple[str, ...] = (
    "Autonomie",
    "Équilibre vie pro/perso",
    "Salaire attractif",
    "Évolution de carrière",
    "Formation continue",
    "Reconnaissance",
    "Défis techniques",
    "Travail en équipe",
    "Innovation",
    "Créativité",
    "Impact social",
    "Stabilité",
    "Diversité des missions",
    "Management",
    "Leadership",
    "Relations clients",
    "Voyage professionnel",
    "Télétravail",
    "Horaires flexibles",
    "Proximité géographique",
    "Ambiance de travail",
    "Responsabilités",
    "Projets variés",
    "Technologies récentes",
    "Secteur d'activité",
    "Taille d'entreprise",
    "Culture d'entreprise",
    "Bien-être au travail",
    "Avantages sociaux",
    "Perspectives d'avenir",
)


# ---------------------------------------------------------------------------
# Matching helpers
# ---------------------------------------------------------------------------


def _entity_name(entity: Any) -> str | None:
    """Name of an existing category/criterion: a model, an object or a dict."""
    if isinstance(entity, Mapping):
        return entity.get("name")
    return getattr(entity, "name", None)


def is_name_used(name: str | None, existing: Iterable[Any] | None) -> bool:
    """True if *name* matches an existing entity's name, ignoring case and accents.

    Args:
        name:     Candidate name.
        existing: Entities exposing ``.name`` (or ``["name"]``).

    Returns:
        False when *name* is blank or nothing exists yet.
    """
    if not name or not existing:
        return False
    target = normalize(name)
    return any(normalize(_entity_name(entity)) == target for entity in existing)


def filter_interest_suggestions(
    search_term: str | None,
    catalog: Sequence[str] = INTEREST_SUGGESTIONS,
    existing: Iterable[Any] | None = (),
) -> list[str]:
    """Interest suggestions not yet used that contain *search_term*.

    A blank search term matches everything; already-used names are always
    excluded.  Catalog order is preserved.
    """
    used = {normalize(_entity_name(entity)) for entity in (existing or ())}
    needle = normalize(search_term) if search_term and search_term.strip() else ""

    results = [
        suggestion
        for suggestion in catalog
        if normalize(suggestion) not in used and needle in normalize(suggestion)
    ]
    logger.debug(
        "Interest filter %r: %d/%d suggestions (%d in use)",
        search_term, len(results), len(catalog), len(used),
    )
    return results


def filter_motivation_suggestions(
    search_term: str | None,
    catalog: Sequence[str] = MOTIVATION_SUGGESTIONS,
) -> list[str]:
    """Motivation suggestions containing *search_term*.

    Unlike interests, motivations are not checked against existing criteria.
    """
    if not search_term or not search_term.strip():
        return list(catalog)
    needle = normalize(search_term)
    return [suggestion for suggestion in catalog if needle in normalize(suggestion)]

"""Section header labels shared by the Tk and NiceGUI views.

Call context:
    ``FoodListView`` and ``WebFoodScreenVM`` call ``section_title`` when
    rendering section header rows.
"""

from __future__ import annotations

from ..domain.entities import SectionIdentifier

SECTION_TITLES = {
    SectionIdentifier.FAVOURITE_FOOD: "Favourite food",
    SectionIdentifier.RESTAURANTS: "Restaurants",
    SectionIdentifier.NEARBY_USERS: "Nearby users",
    SectionIdentifier.DISCLAIMERS: "Disclaimers",
}


def section_title(section: SectionIdentifier) -> str:
    """Return the operator-facing header for ``section``."""
    return SECTION_TITLES.get(section, str(section))


__all__ = ["SECTION_TITLES", "section_title"]

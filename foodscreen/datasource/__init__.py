"""Section providers and the composite data source feeding the food view model.

Call context:
    ``foodscreen/app/main.py`` builds a ``FoodDataSource`` through
    ``FoodDataSource.create`` and hands it to ``FoodViewModel``.

Dependencies:
    Modules in this package depend on domain types, the ``CallbackSlot``
    helper and a ``RepeatingScheduler`` port. No Tk imports live here.
"""

from .disclaimers import DisclaimersSection
from .favourite_food import FavouriteFoodSection
from .food_data_source import FoodDataSource
from .nearby_users import NearbyUsersSection
from .restaurants import RestaurantsSection

__all__ = [
    "DisclaimersSection",
    "FavouriteFoodSection",
    "FoodDataSource",
    "NearbyUsersSection",
    "RestaurantsSection",
]

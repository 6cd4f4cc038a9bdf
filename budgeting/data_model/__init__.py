from .items import ITEM_CATEGORIES, NEED, WANT, FinancialItem
from .profile import Profile
from .projection import UNREACHABLE, Projection

__all__ = [
    "ITEM_CATEGORIES",
    "NEED",
    "WANT",
    "UNREACHABLE",
    "FinancialItem",
    "Profile",
    "Projection",
]

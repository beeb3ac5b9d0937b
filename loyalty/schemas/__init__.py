from .loyalty import ChangeNotification, ClassificationInput, LoyaltyOut

__all__ = [
    "ChangeNotification",
    "ClassificationInput",
    "LoyaltyOut",
]

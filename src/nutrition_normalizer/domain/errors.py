"""Domain errors."""


class NutritionDataError(ValueError):
    """Base error for nutrition data that cannot be processed."""


class InsufficientNutritionDataError(NutritionDataError):
    """Raised when a product has neither per-100g nor per-serving nutrition."""


class ProductNotFoundError(LookupError):
    """Raised when the product database has no record for a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product {barcode} not found")
        self.barcode = barcode

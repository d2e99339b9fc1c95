"""Exceptions raised by the style assistant."""


class StyleAssistantError(Exception):
    """Base class for style assistant errors."""
    pass


class ProductNotFoundError(StyleAssistantError):
    """Raised when the reference product id does not exist in the catalog."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class CompletionError(StyleAssistantError):
    """Raised by a text completion client on any failed call."""
    pass

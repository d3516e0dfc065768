"""Product module entry point used by the HTTP layer."""


class ProductService:
    """Facade of the product module for inbound callers."""

    def get_greeting(self) -> str:
        return "Hello from Product Module! 📦"

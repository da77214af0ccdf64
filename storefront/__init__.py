"""Dev Electricals storefront: repair booking API, store and form client."""

__version__ = "0.1.0"

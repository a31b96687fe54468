"""
Meat shop storefront

Catalog, cart, order lifecycle and shop settings for a single fresh-meat shop,
persisted as one JSON snapshot on local storage.
"""

__version__ = "1.0.0"

"""
Products database configuration.
Stores the sample product catalogue served by GET /.
"""


class Collections:
    """Collection names in the products database."""
    PRODUCTS = "products"


# Inserted once, when the products collection is empty
SAMPLE_PRODUCTS = [
    {"kind": "orange", "count": 44},
    {"kind": "banana", "count": 33},
    {"kind": "grapes", "count": 19},
]

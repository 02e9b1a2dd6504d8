"""E-commerce demo: composition vs aggregation, value objects, class-level state.

Customers own a cart (composition) and reference their orders (aggregation).
Money is an immutable value object; the store numbers orders with a counter
shared by every store instance.
"""

NAME = "ecommerce"
DESCRIPTION = "Online store with carts, orders and currency-safe money"
CONCEPTS = ("composition", "aggregation", "value objects", "class methods")

"""Coffee shop demo: encapsulation with validated properties and composition.

A Store has an Owner and holds a list of Coffee varieties it can sell.
"""

NAME = "coffee"
DESCRIPTION = "Coffee shop with stock, sales and revenue tracking"
CONCEPTS = ("encapsulation", "properties", "composition")

"""Vehicle hierarchy demo: method overriding and the template method pattern."""

NAME = "vehicles"
DESCRIPTION = "Cars, motorcycles and trucks managed as one fleet"
CONCEPTS = ("polymorphism", "method overriding", "template method")

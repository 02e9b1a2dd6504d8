"""Shape calculator demo: abstract methods, protocols and polymorphism."""

NAME = "shapes"
DESCRIPTION = "Rectangles, circles and triangles with area and perimeter reports"
CONCEPTS = ("abstract methods", "protocols", "polymorphism", "singleton")

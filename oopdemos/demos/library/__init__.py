"""Library demo: interfaces, abstract base classes and error handling.

Books and magazines share a LibraryItem base and satisfy the Borrowable
protocol; members may hold a limited number of items at once.
"""

NAME = "library"
DESCRIPTION = "Library items, members and borrowing rules"
CONCEPTS = ("abstract classes", "protocols", "error handling")

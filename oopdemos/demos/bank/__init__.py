"""Mini bank demo: guarding state behind methods."""

NAME = "bank"
DESCRIPTION = "Accounts with deposits, withdrawals and account status"
CONCEPTS = ("encapsulation", "read-only attributes", "guard clauses")

"""oopdemos: small object-oriented programming teaching demos.

Eight self-contained demos (coffee shop, e-commerce, family, RPG characters,
library, mini bank, shapes, vehicles) each build a handful of objects and
narrate what they do. A small runner lists them, runs one or all, and
reports which finished cleanly.

Usage:
    python -m oopdemos list                  # Show demos
    python -m oopdemos run coffee            # Run one demo
    python -m oopdemos run --all --seed 7    # Run everything, reproducibly
    python -m oopdemos.demos.bank.demo       # Run a demo script directly
"""

"""
Genetic-algorithm solver for the Traveling Salesman Problem: tours as
chromosomes, order-preserving crossover, swap mutation and a seeded
generational loop.
"""

__all__ = [
    "data",
    "errors",
    "evaluation",
    "evolutionary",
    "population",
]

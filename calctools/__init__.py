"""Calculator tools service: compound interest, discounts, stock averages and text stats."""

__version__ = "0.1.0"

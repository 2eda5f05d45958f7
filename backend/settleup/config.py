"""Settings read from the environment."""
import os

# Remainders at or below this are treated as fully settled.
SETTLEMENT_EPSILON = float(os.getenv("SETTLEMENT_EPSILON", "0.001"))

DEFAULT_CATEGORY = os.getenv("DEFAULT_EXPENSE_CATEGORY", "Other")

# Display rounding for annotated output only; the core never rounds.
AMOUNT_DECIMALS = int(os.getenv("AMOUNT_DECIMALS", "2"))

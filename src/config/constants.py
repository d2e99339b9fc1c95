"""
Catalog vocabulary and style constants.

These are values that don't change based on environment but are
referenced across the style assistant.
"""

from typing import Tuple


# =============================================================================
# Catalog Vocabulary
# =============================================================================

# Fixed category names used by the store (stored uppercase).
CATEGORY_NAMES: Tuple[str, ...] = (
    "BAGS",
    "BLAZERS",
    "DRESSES/JUMPSUITS",
    "JACKETS",
    "SHIRTS",
    "SHOES",
    "SWEATERS",
    "TRENDING",
    "WAISTCOATS",
    "SKIRTS",
    "T-SHIRT/TOPS",
)


# =============================================================================
# Recommendation Limits
# =============================================================================

MAX_RECOMMENDATIONS = 12


# =============================================================================
# Colors
# =============================================================================

# Returned whenever the AI color suggestion fails.
FALLBACK_COLORS: Tuple[str, ...] = ("BLACK", "WHITE", "GRAY", "NAVY", "BEIGE")

# Hue tokens treated as warm when picking jewelry metals.
WARM_COLOR_TOKENS: Tuple[str, ...] = (
    "RED", "ORANGE", "YELLOW", "GOLD", "BROWN", "BEIGE", "CREAM",
    "CORAL", "MUSTARD", "CAMEL", "TAN", "BURGUNDY", "RUST", "KHAKI",
)

"""Context budgeting package.

Provides budget calculation and conversation pruning against model limits.
"""

from .budget import calculate_budget, fits_budget
from .pruning import prune_messages

__all__ = ["calculate_budget", "fits_budget", "prune_messages"]

from .graph import FitnessGraph
from .nodes import analysis_node, recommendation_node, plan_node, validate_node

__all__ = [
    "FitnessGraph",
    "analysis_node",
    "recommendation_node",
    "plan_node",
    "validate_node",
]

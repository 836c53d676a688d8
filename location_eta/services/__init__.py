"""Services layer - Application orchestration.

Available services:
- OrderStateStore: Typed get/set of order fields
- TravelTimeEstimator: Directions lookup normalized to a duration
- OrderUpdateReconciler: Main service applying order updates
"""

from .estimator import TravelTimeEstimator
from .reconciler import OrderUpdateReconciler
from .state_store import OrderStateStore

__all__ = ["OrderStateStore", "TravelTimeEstimator", "OrderUpdateReconciler"]

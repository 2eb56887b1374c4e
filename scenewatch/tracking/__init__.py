"""Scene tracking: status reconciliation and search scheduling."""

from scenewatch.tracking.reconciler import SceneReconciler
from scenewatch.tracking.scheduler import SceneScheduler

__all__ = ["SceneReconciler", "SceneScheduler"]

"""Application services wiring core operations to the BoardStore."""

from multidrag.app.services.drag_session import DragSessionCoordinator
from multidrag.app.services.selection_service import SelectionService

__all__ = ["DragSessionCoordinator", "SelectionService"]

"""Application state management.

Qt-free state containers for the board, the selection and the drag session.
"""

from multidrag.app.state.board_store import BoardStore

__all__ = ["BoardStore"]

"""Application factory - creates a fully wired board.

Host applications call create_board_app() once at startup and then feed
decoded gestures to the returned services. Passing log_dir also installs
the root logging handlers (ConfigureLogger), which hosts that configure
logging themselves leave out.

Date: 2026-10-19
"""

from __future__ import annotations

from multidrag.app.services import DragSessionCoordinator, SelectionService
from multidrag.app.state import BoardStore
from multidrag.config import APP_NAME
from multidrag.domain.board import Board
from multidrag.domain.keyboard import Platform
from multidrag.domain.selection import EMPTY_SELECTION, Selection
from multidrag.utils.logging.logger_factory import get_cached_logger
from multidrag.utils.logging.logger_setup import ConfigureLogger

logger = get_cached_logger(__name__)


class BoardApp:
    """Container for the wired board components."""

    def __init__(
        self,
        store: BoardStore,
        selection: SelectionService,
        drag: DragSessionCoordinator,
    ) -> None:
        self.store = store
        self.selection = selection
        self.drag = drag


def create_board_app(
    board: Board,
    selection: Selection = EMPTY_SELECTION,
    platform: Platform | None = None,
    log_dir: str | None = None,
) -> BoardApp:
    """Create a BoardStore with its selection and drag services.

    Args:
        board: Initial board snapshot
        selection: Initial selection
        platform: Platform for modifier handling; detected when None
        log_dir: Directory for log files; when given, root logging is configured

    Returns:
        BoardApp container

    """
    if log_dir is not None:
        ConfigureLogger(log_name=APP_NAME, log_dir=log_dir)

    platform = platform or Platform.detect()
    store = BoardStore(board, selection)

    app = BoardApp(
        store=store,
        selection=SelectionService(store, platform),
        drag=DragSessionCoordinator(store),
    )

    logger.info(
        "[boot] Board ready: %d columns, %d tasks, platform=%s",
        len(board.column_order),
        board.task_count,
        platform,
    )
    return app

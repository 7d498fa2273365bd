"""Boot layer: wiring of store and services."""

from multidrag.boot.app_factory import BoardApp, create_board_app

__all__ = ["BoardApp", "create_board_app"]

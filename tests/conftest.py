"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the multidrag test suite.
"""

import os

import pytest

from multidrag.domain.board import Board, Column, Task
from multidrag.domain.keyboard import Platform
from multidrag.utils.logging.logger_factory import LoggerFactory


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring a Qt toolkit")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


def make_board(**columns: list[str]) -> Board:
    """Build a board from column id -> task ids; columns keep keyword order."""
    return Board.from_columns(
        [
            Column(id=column_id, title=column_id.upper(), task_ids=tuple(task_ids))
            for column_id, task_ids in columns.items()
        ],
        [
            Task(id=task_id, content=f"Task {task_id}")
            for task_ids in columns.values()
            for task_id in task_ids
        ],
    )


def all_placed_ids(board: Board) -> list[str]:
    """Every task id on the board, column by column."""
    return [
        task_id
        for column_id in board.column_order
        for task_id in board.columns[column_id].task_ids
    ]


@pytest.fixture
def board_factory():
    """Factory fixture: board_factory(c1=["t1"], c2=[]) -> Board."""
    return make_board


@pytest.fixture
def placed_ids():
    """Helper fixture: placed_ids(board) -> every task id, column by column."""
    return all_placed_ids


@pytest.fixture
def board():
    """Three columns: c1 = t1..t4, c2 = t5..t7, c3 = t8."""
    return make_board(
        c1=["t1", "t2", "t3", "t4"],
        c2=["t5", "t6", "t7"],
        c3=["t8"],
    )


@pytest.fixture
def two_column_board():
    """c1 = t1..t3, c2 = t4, t5."""
    return make_board(c1=["t1", "t2", "t3"], c2=["t4", "t5"])


@pytest.fixture
def windows():
    return Platform.WINDOWS


@pytest.fixture
def mac():
    return Platform.OTHER


@pytest.fixture(autouse=True)
def reset_logger_cache():
    """Keep cached logger state from leaking between tests."""
    yield
    LoggerFactory.clear_cache()

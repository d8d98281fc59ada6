"""Pilot-driven tests for the full-screen interface."""

from datetime import datetime
from pathlib import Path

import pytest
from textual.widgets import Input

from toru.application import TaskSession
from toru.domain.task import Tree
from toru.infrastructure.storage import TreeRepository
from toru.interfaces.cli.common import format_listing
from toru.tui import ToruApp
from toru.tui.screens import AddTaskModal, HelpModal, TaskScreen
from toru.tui.widgets import TaskListWidget

PAUSE = 0.1
SIZE = (100, 30)


def task_screen(app: ToruApp) -> TaskScreen:
    screen = app.screen
    assert isinstance(screen, TaskScreen)
    return screen


@pytest.mark.asyncio
async def test_starts_at_home(spawn_tree: Tree) -> None:
    app = ToruApp(TaskSession(spawn_tree))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        screen = task_screen(app)
        assert app.title == "Home"
        assert screen.selected == 0
        assert screen.query_one(TaskListWidget).lines == ["1. + Task 1", "2. + Task 2"]


@pytest.mark.asyncio
async def test_selection_moves_and_stops_at_edges(spawn_tree: Tree) -> None:
    app = ToruApp(TaskSession(spawn_tree))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)
        screen = task_screen(app)

        await pilot.press("j", "j", "j")
        assert screen.selected == 1

        await pilot.press("k", "up", "k")
        assert screen.selected == 0

        await pilot.press("down")
        assert screen.selected == 1


@pytest.mark.asyncio
async def test_descend_and_ascend(spawn_tree: Tree) -> None:
    session = TaskSession(spawn_tree)
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)
        screen = task_screen(app)

        await pilot.press("j", "l")
        assert app.title == "Task 2"
        assert session.tree.cursor == 2
        assert screen.selected == 0

        await pilot.press("h")
        assert app.title == "Home"

        await pilot.press("enter")
        assert app.title == "Task 1"

        await pilot.press("left", "right")
        assert app.title == "Task 1"


@pytest.mark.asyncio
async def test_complete_clamps_selection(spawn_tree: Tree) -> None:
    session = TaskSession(spawn_tree)
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)
        screen = task_screen(app)

        await pilot.press("j", "c")
        await pilot.pause(delay=PAUSE)

        assert [e.name for e in session.listing().entries] == ["Task 1"]
        assert screen.selected == 0
        assert screen.entry_count == 1


@pytest.mark.asyncio
async def test_delete_selected(spawn_tree: Tree) -> None:
    session = TaskSession(spawn_tree)
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        await pilot.press("d")
        await pilot.pause(delay=PAUSE)

        assert session.tree.size() == 4
        assert task_screen(app).query_one(TaskListWidget).lines == ["1. + Task 2"]


@pytest.mark.asyncio
async def test_actions_on_empty_list_do_nothing() -> None:
    session = TaskSession()
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        await pilot.press("c", "d", "l", "j")
        await pilot.pause(delay=PAUSE)

        assert session.tree == Tree.new()
        assert task_screen(app).selected == 0


@pytest.mark.asyncio
async def test_add_task_through_modal() -> None:
    session = TaskSession()
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        await pilot.press("a")
        await pilot.pause(delay=PAUSE)
        modal = app.screen
        assert isinstance(modal, AddTaskModal)

        modal.query_one("#task-name", Input).value = "Buy milk"
        await pilot.press("enter")
        modal.query_one("#task-due", Input).value = "2024-05-01 09:00 AM"
        await pilot.press("enter")
        await pilot.pause(delay=PAUSE)

        assert isinstance(app.screen, TaskScreen)
        (entry,) = session.listing().entries
        assert entry.name == "Buy milk"
        assert entry.due is not None and entry.due.hour == 9
        assert task_screen(app).query_one(TaskListWidget).lines == ["1.   Buy milk | 09:00 AM 2024-05-01"]


@pytest.mark.asyncio
async def test_add_modal_requires_a_name() -> None:
    session = TaskSession()
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        await pilot.press("a")
        await pilot.pause(delay=PAUSE)
        await pilot.press("enter", "enter")
        await pilot.pause(delay=PAUSE)

        assert isinstance(app.screen, AddTaskModal)
        assert session.listing().entries == []

        await pilot.press("escape")
        await pilot.pause(delay=PAUSE)
        assert isinstance(app.screen, TaskScreen)


@pytest.mark.asyncio
async def test_help_modal_opens_and_closes() -> None:
    app = ToruApp(TaskSession())
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        await pilot.press("question_mark")
        await pilot.pause(delay=PAUSE)
        assert isinstance(app.screen, HelpModal)

        await pilot.press("escape")
        await pilot.pause(delay=PAUSE)
        assert isinstance(app.screen, TaskScreen)


@pytest.mark.asyncio
async def test_quit_saves(save_file: Path) -> None:
    session = TaskSession(repository=TreeRepository(save_file))
    session.add("Buy milk")
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)
        await pilot.press("q")

    assert app.return_code == 0
    assert TreeRepository(save_file).load().value.size() == 2


@pytest.mark.asyncio
async def test_quit_reports_save_failure() -> None:
    app = ToruApp(TaskSession())
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)
        await pilot.press("q")

    assert app.return_code == 1
    assert app.save_error == "No save file configured"


@pytest.mark.asyncio
async def test_rows_match_command_line_listing() -> None:
    session = TaskSession()
    session.add("Dentist", datetime(2024, 5, 1, 15, 0))
    session.add("Buy milk")
    app = ToruApp(session)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause(delay=PAUSE)

        rows = task_screen(app).query_one(TaskListWidget).lines

    assert rows == format_listing(session.listing())[3:]
    assert rows[0] == "1.   Dentist | 03:00 PM 2024-05-01"

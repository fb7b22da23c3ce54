import pytest

from patternkit.factory_method import (
    MagicMaze,
    MagicRoom,
    MazeGame,
    OrdinaryMaze,
    OrdinaryRoom,
    Room,
    main,
    run,
)


class _RecordingRoom(Room):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def render(self):
        self.log.append(self.name)


class _ListMaze(MazeGame):
    def __init__(self, rooms):
        self._rooms = rooms

    def rooms(self):
        return list(self._rooms)


def test_ordinary_maze_rooms_are_reversed():
    assert OrdinaryMaze().rooms() == [OrdinaryRoom(2), OrdinaryRoom(1)]


def test_magic_maze_rooms_keep_order():
    assert MagicMaze().rooms() == [MagicRoom("Infinite Room"), MagicRoom("Red Room")]


def test_rooms_returns_a_copy():
    maze = MagicMaze()
    rooms = maze.rooms()
    rooms.clear()
    assert len(maze.rooms()) == 2


def test_ordinary_maze_reverses_custom_rooms():
    rooms = [OrdinaryRoom(n) for n in (5, 6, 7)]
    assert OrdinaryMaze(rooms).rooms() == list(reversed(rooms))


def test_play_renders_each_room_in_order(capsys):
    OrdinaryMaze([OrdinaryRoom(n) for n in (5, 6, 7)]).play()
    assert capsys.readouterr().out.splitlines() == [
        "Ordinary Room: #7",
        "Ordinary Room: #6",
        "Ordinary Room: #5",
    ]


def test_ordinary_play_output(capsys):
    OrdinaryMaze().play()
    assert capsys.readouterr().out == "Ordinary Room: #2\nOrdinary Room: #1\n"


def test_run_announces_before_playing(capsys):
    run(_ListMaze([]))
    assert capsys.readouterr().out.splitlines() == [
        "Loading resources ...",
        "Starting the game...",
    ]


def test_main_plays_both_mazes(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert lines.count("Loading resources ...") == 2
    assert lines[-1] == "Magic Room:Red Room"


def test_maze_game_is_abstract():
    with pytest.raises(TypeError):
        MazeGame()
"""Factory method: maze games that decide which rooms they are made of."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


class Room(ABC):
    """A room that can be shown to the player."""

    @abstractmethod
    def render(self) -> str:
        """Show the room and return the line that was shown."""


class MazeGame(ABC):
    """A game whose rooms are supplied by the subclass."""

    @abstractmethod
    def rooms(self) -> list[Room]:
        """Return the rooms in the order they are played."""

    def play(self) -> list[str]:
        """Render every room in turn and return the lines shown."""
        return [room.render() for room in self.rooms()]


@dataclass(frozen=True)
class MagicRoom(Room):
    title: str

    def render(self) -> str:
        line = f"Magic Room:{self.title}"
        print(line)
        return line


@dataclass(frozen=True)
class OrdinaryRoom(Room):
    room_id: int

    def render(self) -> str:
        line = f"Ordinary Room: #{self.room_id}"
        print(line)
        return line


class MagicMaze(MazeGame):
    """A maze of magic rooms, played in the order they were given."""

    def __init__(self, rooms: Iterable[MagicRoom] | None = None) -> None:
        if rooms is None:
            rooms = (MagicRoom("Infinite Room"), MagicRoom("Red Room"))
        self._rooms = list(rooms)

    def rooms(self) -> list[MagicRoom]:
        return list(self._rooms)


class OrdinaryMaze(MazeGame):
    """A maze of numbered rooms, played in reverse order."""

    def __init__(self, rooms: Iterable[OrdinaryRoom] | None = None) -> None:
        if rooms is None:
            rooms = (OrdinaryRoom(1), OrdinaryRoom(2))
        self._rooms = list(rooms)

    def rooms(self) -> list[OrdinaryRoom]:
        return list(reversed(self._rooms))


def run(maze_game: MazeGame) -> None:
    """Announce the game and play it."""
    print("Loading resources ...")
    print("Starting the game...")
    maze_game.play()


def main(argv: list[str] | None = None) -> int:
    """Play an ordinary maze, then a magic one."""
    argparse.ArgumentParser(description="Play the maze games.").parse_args(argv)
    run(OrdinaryMaze())
    run(MagicMaze())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
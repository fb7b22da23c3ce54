"""Singleton: one shared, thread-safe record of calls, and explicit state passing."""

from __future__ import annotations

import argparse
import threading


class CallLog:
    """A thread-safe record of calls."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[int] = []

    def record(self) -> None:
        with self._lock:
            self._entries.append(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


CALLS = CallLog()


def do_a_call() -> None:
    """Record one call in the shared log."""
    CALLS.record()


def change(global_state: int) -> int:
    """Return the state advanced by one."""
    return global_state + 1


def main(argv: list[str] | None = None) -> int:
    """Show a shared call log and explicitly passed state."""
    parser = argparse.ArgumentParser(description="Singleton examples.")
    parser.add_argument(
        "--variant",
        choices=("lazy", "mutex", "safe"),
        default="mutex",
        help="which example to run (default: mutex)",
    )
    args = parser.parse_args(argv)

    if args.variant == "safe":
        state = change(0)
        print(f"Final state:{state}")
        return 0

    for _ in range(3):
        do_a_call()
    if args.variant == "lazy":
        print(f"Called {len(CALLS)}")
    else:
        print(f"Called {len(CALLS)} times")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
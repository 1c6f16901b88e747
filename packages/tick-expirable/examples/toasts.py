"""Toasts -- transient notifications that fade out on their own.

Demonstrates:
- Wrapping payloads with build() and a lifetime in seconds
- Replacing the collection with tick_all() on every timer signal
- Drawing progress with percent_complete()
- Reacting to dismissals through on_expire
- A late timer signal still counting real elapsed time

The timer is simulated so the demo runs instantly.

Run: python -m examples.toasts
"""

from tick_expirable import (
    Expirable,
    Timestamp,
    build,
    percent_complete,
    tick_all,
    value,
)


def bar(toast: Expirable[str], width: int = 20) -> str:
    done = int(percent_complete(toast) * width)
    return "#" * done + "." * (width - done)


def dismissed(toast: Expirable[str]) -> None:
    print(f"    dismissed: {value(toast)!r}")


def main() -> None:
    print("=== Toasts ===\n")

    toasts = [
        build(3, "Saved"),
        build(6, "Upload finished"),
        build(10, "New version available"),
    ]

    # Milliseconds at which the host's once-per-second timer fires.
    # The 4th signal is 2.4s late, which rounds to 2 seconds of countdown.
    signals = [0, 1_000, 2_000, 5_400, 6_400, 7_400, 8_400, 9_400]

    start = Timestamp.now().millis
    for offset in signals:
        now = Timestamp(start + offset)
        toasts = tick_all(now, toasts, on_expire=dismissed)
        print(f"  t+{offset / 1000:4.1f}s  ({len(toasts)} showing)")
        for toast in toasts:
            print(f"    [{bar(toast)}] {value(toast)}")

    print("\nDone.")


if __name__ == "__main__":
    main()

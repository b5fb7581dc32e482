"""Round-robin scheduling example using Deque.rotate."""

from linkeddeque import Deque


def main() -> None:
    """Hand out time slices to workers in turn, dropping finished ones."""
    # Remaining work units per worker
    remaining = {"alpha": 3, "beta": 1, "gamma": 2}
    workers = Deque(remaining)

    print("=== Round-Robin Example ===\n")

    tick = 0
    while workers:
        current = workers.get_head()
        remaining[current] -= 1
        tick += 1
        print(f"tick {tick}: {current} runs ({remaining[current]} left)")

        if remaining[current] == 0:
            workers.popleft()
            print(f"  {current} finished, queue is now {workers}")
        else:
            # Move the head to the back
            workers.rotate(-1)

    print(f"\nAll work done after {tick} ticks")


if __name__ == "__main__":
    main()

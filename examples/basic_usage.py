"""Basic usage example for linkeddeque."""

from linkeddeque import Deque, DequeIndexError


def main() -> None:
    """Demonstrate basic deque operations."""
    dq = Deque[str]()

    print("=== End Operations ===\n")

    dq.push("b")
    dq.push("c")
    dq.push_left("a")
    print(f"Deque: {dq}")
    print(f"Length: {dq.length}")
    print(f"Head: {dq.get_head()}, tail: {dq.get_tail()}\n")

    print(f"pop() -> {dq.pop()}")
    print(f"popleft() -> {dq.popleft()}")
    print(f"Deque: {dq}\n")

    print("=== Indexed Operations ===\n")

    dq = Deque(["red", "green", "blue"])
    dq.insert_at("yellow", 1)
    print(f"After insert_at('yellow', 1): {dq.to_list()}")
    print(f"at(2) -> {dq.at(2)}")
    print(f"remove_at(1) -> {dq.remove_at(1)}")
    print(f"find('blue') -> {dq.find('blue')}")

    try:
        dq.at(10)
    except DequeIndexError as exc:
        print(f"at(10) failed: {exc}\n")

    print("=== Structural Operations ===\n")

    dq = Deque(range(1, 6))
    dq.rotate(2)
    print(f"rotate(2): {dq.to_list()}")
    dq.rotate(-2)
    print(f"rotate(-2): {dq.to_list()}")
    dq.reverse()
    print(f"reverse(): {dq.to_list()}")

    clone = dq.copy()
    clone.clear()
    print(f"Original after clearing a copy: {dq}")
    print(f"Cleared copy: {clone}")


if __name__ == "__main__":
    main()

from collections.abc import Iterable, Iterator

from linkednumber.digit import Digit


class DigitNode:
    """Node for doubly linked list representation of a digit sequence."""

    def __init__(self, digit: Digit):
        self.digit = digit
        self.prev: DigitNode | None = None
        self.next: DigitNode | None = None

    def __repr__(self):
        return f"Node({self.digit})"


class DigitChain:
    """
    Doubly linked list of digits, head = most significant, tail = least significant.

    The chain owns its nodes; ``prev``/``next`` are only used for traversal
    and splicing. Positions passed to ``node_at`` count from the tail.
    """

    def __init__(self, digits: Iterable[Digit] = ()):
        self.head: DigitNode | None = None
        self.tail: DigitNode | None = None
        self.size = 0

        # Build the linked list from the digit sequence
        for digit in digits:
            self.append(digit)

    def append(self, digit: Digit) -> DigitNode:
        """Add a digit after the tail and return the new node."""
        new_node = DigitNode(digit)
        if self.tail is None:
            self.head = self.tail = new_node
        else:
            new_node.prev = self.tail
            self.tail.next = new_node
            self.tail = new_node
        self.size += 1
        return new_node

    def prepend(self, digit: Digit) -> DigitNode:
        """Add a digit before the head and return the new node."""
        new_node = DigitNode(digit)
        if self.head is None:
            self.head = self.tail = new_node
        else:
            new_node.next = self.head
            self.head.prev = new_node
            self.head = new_node
        self.size += 1
        return new_node

    def insert_before(self, node: DigitNode, digit: Digit) -> DigitNode:
        """Insert a new digit immediately before the given node and return the new node."""
        new_node = DigitNode(digit)
        new_node.prev = node.prev
        new_node.next = node

        if node.prev:
            node.prev.next = new_node
        else:
            self.head = new_node

        node.prev = new_node
        self.size += 1
        return new_node

    def remove_node(self, node: DigitNode) -> None:
        """Remove a node from the list in O(1) time."""
        if node.prev:
            node.prev.next = node.next
        else:
            self.head = node.next

        if node.next:
            node.next.prev = node.prev
        else:
            self.tail = node.prev

        node.prev = node.next = None
        self.size -= 1

    def node_at(self, position: int) -> DigitNode:
        """Return the node at a tail-relative position, walking from the nearer end."""
        if not 0 <= position < self.size:
            raise IndexError(f"position {position} out of range for {self.size} digits")

        if position < self.size // 2:
            current = self.tail
            for _ in range(position):
                current = current.prev
        else:
            current = self.head
            for _ in range(self.size - 1 - position):
                current = current.next
        return current

    def __iter__(self) -> Iterator[Digit]:
        current = self.head
        while current:
            yield current.digit
            current = current.next

    def __reversed__(self) -> Iterator[Digit]:
        current = self.tail
        while current:
            yield current.digit
            current = current.prev

    def is_consistent(self) -> bool:
        """Check that the forward and backward links describe the same chain."""
        if self.head is None or self.tail is None:
            return self.head is None and self.tail is None and self.size == 0
        if self.head.prev is not None or self.tail.next is not None:
            return False

        count = 0
        current = self.head
        while current:
            count += 1
            if current.next is not None and current.next.prev is not current:
                return False
            if current.next is None and current is not self.tail:
                return False
            current = current.next
        return count == self.size

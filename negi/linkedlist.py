"""A circular doubly linked list with stable node handles."""


class ListNode:
    """One entry of a :class:`LinkedList`."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value=None):
        self.value = value
        self.prev = None
        self.next = None
        self._owner = None

    def __repr__(self):
        return f"ListNode({self.value!r})"


class LinkedList:
    """Doubly linked list; adding returns the node so it can be removed later."""

    def __init__(self, values=()):
        self._head = ListNode()
        self._head.prev = self._head
        self._head.next = self._head
        self._size = 0
        for value in values:
            self.add_tail(value)

    def _insert(self, value, prev, following):
        if following.prev is not prev or prev.next is not following:
            raise RuntimeError("list corruption detected while adding a node")

        node = ListNode(value)
        node._owner = self
        following.prev = node
        node.next = following
        node.prev = prev
        prev.next = node
        self._size += 1
        return node

    def add(self, value):
        """Insert ``value`` at the front and return its node."""
        return self._insert(value, self._head, self._head.next)

    def add_tail(self, value):
        """Insert ``value`` at the back and return its node."""
        return self._insert(value, self._head.prev, self._head)

    def remove(self, node):
        """Unlink ``node`` and return its value."""
        if (
            node._owner is not self
            or node.next is None
            or node.next.prev is not node
            or node.prev.next is not node
        ):
            raise ValueError("node is not linked into this list")

        node.prev.next = node.next
        node.next.prev = node.prev
        node.next = None
        node.prev = None
        node._owner = None
        self._size -= 1
        return node.value

    def is_empty(self):
        return self._head.next is self._head

    def is_first(self, node):
        return node.prev is self._head

    def is_last(self, node):
        return node.next is self._head

    def nodes(self):
        """Yield nodes front to back; the yielded node may be removed."""
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node
            node = following

    def __iter__(self):
        return (node.value for node in self.nodes())

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"LinkedList({list(self)!r})"
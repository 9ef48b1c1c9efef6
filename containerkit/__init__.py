"""Hand-built container types: vector, stack, linked list, queue, tree map and hash map."""

__version__ = "0.1.0"
__all__ = ["fifo", "hashmap", "linked_list", "stack", "treemap", "vector"]
"""Classic data structures and algorithms: array and subarray routines, sorting,
linked stacks and queues, and n-ary, binary, search and AVL trees."""

__version__ = "0.1.0"
# dsakit

A small library of classic data-structure and algorithm routines in plain
Python, with no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.array_basics` | `min_max`, `largest`, `second_largest`, `rotate_left_by_one`, `rotate_right`, `bubble_sort`, `median_of_sorted_arrays`, `count_good_pairs` |
| `dsakit.subarrays` | `max_subarray_sum`, `max_subarray_sum_nonnegative`, `longest_subarray_with_sum`, `trapped_rain_water` |
| `dsakit.allocation` | `min_candies`, `min_candies_constant_space`, `n_choose_r`, `pascal_element`, `is_feasible`, `allocate_pages`, `allocate_pages_brute_force` |
| `dsakit.pairs` | `three_sum`, `two_repeated`, `two_sum`, `is_anagram` |
| `dsakit.sorting` | `partition`, `quick_sort`, `next_gap`, `merge_in_place`, `merge_sorted` |
| `dsakit.stacks` | `LinkedStack`, `LinkedQueue`, `EmptyStackError`, `insert_at_bottom`, `reverse_stack` |
| `dsakit.strings` | `can_make_palindrome` |
| `dsakit.nary_tree` | `TreeNode`, `build_level_wise`, `max_data_node` |
| `dsakit.binary_tree` | `Node`, `build_level_order`, `is_same_tree`, `insert_level_order`, `fix_tree`, `insert_array`, `insert_complete`, `preorder`, `inorder`, `postorder`, `level_order`, `has_duplicate_values` |
| `dsakit.bst` | `bst_insert`, `levels`, `height`, `is_balanced_at_root` (works on `binary_tree.Node`) |
| `dsakit.avl` | `AVLNode`, `height`, `balance_factor`, `left_rotate`, `right_rotate`, `insert`, `min_node`, `delete`, `inorder` |

Functions that take a sequence return new lists and leave their input alone,
except `sorting.partition`, `sorting.merge_in_place`, `stacks.insert_at_bottom`
and `stacks.reverse_stack`, which work in place.

Empty or unsuitable input raises `ValueError` (for example `largest([])`,
`max_subarray_sum([])`, `two_sum` with no matching pair, or `allocate_pages`
with more students than books).

## Examples

```python
from dsakit.subarrays import max_subarray_sum, trapped_rain_water
from dsakit.allocation import allocate_pages
from dsakit.pairs import three_sum

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
trapped_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
allocate_pages([10, 20, 30, 40], 2)                         # 60
three_sum([-1, 0, 1, 2, -1, -4])                            # [(-1, -1, 2), (-1, 0, 1)]
```

### Stacks and queues

`LinkedStack` and `LinkedQueue` are iterable and sized:

```python
from dsakit.stacks import LinkedStack, LinkedQueue

stack = LinkedStack()
for item in (11, 22, 33, 44):
    stack.push(item)
stack.render()   # "44 -> 33 -> 22 -> 11"
stack.peek()     # 44
stack.pop()      # 44
len(stack)       # 3

queue = LinkedQueue()
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()  # 10
queue.front()    # 20
```

Popping, peeking or rendering an empty stack raises `EmptyStackError`
(a subclass of `IndexError`). On an empty queue, `dequeue`, `front` and `rear`
return `None`.

`reverse_stack` and `insert_at_bottom` operate on a plain list used as a stack,
with the top at the end.

### Trees

```python
from dsakit.binary_tree import build_level_order, level_order, is_same_tree

tree = build_level_order([1, 2, 3, -1, 4])   # -1 or None marks a missing child
level_order(tree)                             # [1, 2, 3, 4]
is_same_tree(tree, build_level_order([1, 2, 3, None, 4]))   # True
```

AVL insertion rebalances with rotations; duplicates are ignored:

```python
from dsakit import avl

root = None
for value in (4, 7, 6, 0, 2, 1, 8):
    root = avl.insert(root, value)
avl.inorder(root)          # [0, 1, 2, 4, 6, 7, 8]
root = avl.delete(root, 4)
avl.inorder(root)          # [0, 1, 2, 6, 7, 8]
```

`avl.delete` removes a value as in a plain search tree: it makes no rotations
and does not update stored heights.

`bst.is_balanced_at_root` compares only the heights of the root's two subtrees;
deeper nodes are not checked.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
values from standard input or prints results. Input such as the token stream
for `nary_tree.build_level_wise` must be passed in by the caller.
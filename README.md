# drills

Small, self-contained solutions to classic algorithm exercises, grouped by
topic. Each function takes plain Python values (lists, strings, ints) or the
package's own node classes and returns its result. There are no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it covers |
| --- | --- |
| `drills.linkedlist` | `ListNode` (with `from_iterable` and iteration over values), `LinkedList` (`push_front`, `push_back`, `delete`, `display`, `len`, iteration), `add_two_numbers`, `get_intersection_node`, `merge_two_lists`, `reverse_list`, `is_palindrome_list`, `delete_duplicates`, `remove_elements` |
| `drills.stacks` | `ListStack` (`push`, `pop`, `top`, `empty`) and `MinStack` (`push`, `pop`, `top`, `get_min`) |
| `drills.heaps` | `KthLargest` stream tracker and `last_stone_weight` |
| `drills.trees` | `TreeNode`, `inorder_traversal`, `diameter`, `invert_tree`, `lowest_common_ancestor_bst`, `merge_trees`, `has_path_sum`, `tree_to_str`, `is_same_tree`, `is_subtree`, `render_tree` |
| `drills.strings` | `str_str`, `is_isomorphic`, `length_of_last_word`, `max_number_of_balloons`, `reverse_chars`, `canonical_email`, `num_unique_emails`, `is_anagram`, `is_palindrome`, `valid_palindrome_ii`, `is_valid_parentheses`, `word_pattern` |
| `drills.word_search` | `TrieNode` and `find_words` on a grid of letters |
| `drills.numbers` | `arrange_coins`, `factors_of_3_or_5`, `guess_number`, `is_happy`, `hamming_weight`, `reverse_integer`, `is_ugly`, `is_perfect_square` |
| `drills.dynamic` | `climb_stairs`, `rob`, `min_cost_climbing_stairs`, `max_profit`, `max_subarray` |
| `drills.searching` | `binary_search`, `search_insert`, `two_sum`, `two_sum_sorted`, `pivot_index`, `next_greater_element` |
| `drills.arrays` | `baseball_score`, `can_place_flowers`, `contains_duplicate`, `find_disappeared_numbers`, `majority_element`, `merge_sorted`, `move_zeroes`, `remove_duplicates`, `remove_element`, `replace_with_greatest_on_right`, `shift_grid`, `single_number`, `sorted_squares` |

## Examples

```python
from drills.linkedlist import ListNode, add_two_numbers

total = add_two_numbers(ListNode.from_iterable([2, 4, 3]),
                        ListNode.from_iterable([5, 6, 4]))
print(list(total))                     # [7, 0, 8]

from drills.trees import TreeNode, tree_to_str

root = TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4)))
print(tree_to_str(root))               # 1(2)(3(4))

from drills.heaps import KthLargest

stream = KthLargest(3, [4, 5, 8, 2])
print(stream.add(3))                   # 4

from drills.word_search import find_words

board = [list("oaan"), list("etae"), list("ihkr"), list("iflv")]
print(sorted(find_words(board, ["oath", "pea", "eat", "rain"])))  # ['eat', 'oath']

from drills.strings import is_valid_parentheses

print(is_valid_parentheses("()[]{}"))  # True
```

## Things to know

- Errors are raised, not signalled by special values: popping or peeking an
  empty `ListStack` or `MinStack` raises `IndexError`, `LinkedList.delete`
  raises `KeyError` for a missing key, `guess_number` raises `ValueError` when
  no number matches, and `max_subarray`, `majority_element` and `tree_to_str`
  raise `ValueError` for empty input.
- `LinkedList.display` prints the list as `a -> b -> ` and also returns that
  line; `render_tree` returns the indented tree as text without printing it.
- `ListNode` and `TreeNode` compare by identity, so `get_intersection_node`
  and `lowest_common_ancestor_bst` work with the very nodes you pass in.
- Some functions change what they are given: `reverse_list`, `invert_tree`
  and `is_palindrome_list` (which reverses the second half of the list);
  `reverse_chars`, `merge_sorted`, `remove_duplicates`, `remove_element`,
  `replace_with_greatest_on_right` and `shift_grid` change the list in place
  and return their result; `move_zeroes` changes the list in place and returns
  `None`. `merge_trees` builds new nodes where both trees have one and shares
  the remaining subtrees.

## What it does not do

`drills` is a library only. It has no command-line program and reads no input
of its own; call its functions from Python.
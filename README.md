# algokit

Classic algorithms and data structures in plain Python, with no
dependencies outside the standard library. Everything is a function or a
small class that you import and call; the package has no command-line
interface.

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

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `two_sum`, `max_area`, `three_sum`, `search_insert`, `trap`, `subsets`, `merge_sorted`, `max_profit`, `longest_consecutive`, `two_sum_sorted`, `contains_duplicate`, `product_except_self`, `find_duplicate`, `reverse_string`, `pivot_index` |
| `algokit.ordering` | `find_median_sorted_arrays`, `largest_rectangle_area`, `top_k_frequent`, `daily_temperatures`, `car_fleet`, `last_stone_weight` |
| `algokit.strings` | `length_of_longest_substring`, `is_valid_parentheses`, `generate_parentheses`, `group_anagrams`, `is_palindrome`, `is_anagram`, `first_unique_char`, `fizz_buzz`, `character_replacement`, `check_inclusion`, `merge_alternately` |
| `algokit.rpn` | `eval_rpn` |
| `algokit.searching` | `int_sqrt`, `search_matrix`, `find_min`, `first_bad_version`, `is_perfect_square`, `judge_square_sum`, `binary_search`, `min_eating_speed` |
| `algokit.linked_list` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end`, `merge_k_lists`, `reverse_k_group`, `copy_random_list`, `has_cycle`, `reorder_list` |
| `algokit.tree` | `TreeNode`, `build_tree`, `is_same_tree`, `level_order`, `max_depth`, `is_balanced`, `right_side_view`, `invert_tree`, `lowest_common_ancestor`, `diameter_of_binary_tree`, `is_subtree`, `good_nodes` |
| `algokit.graphs` | `num_islands`, `can_finish`, `find_order` |
| `algokit.structures` | `LRUCache`, `MinStack`, `Trie`, `WordDictionary`, `KthLargest` |

## Examples

```python
from algokit.arrays import three_sum
from algokit.rpn import eval_rpn
from algokit.linked_list import build_list, list_values, add_two_numbers
from algokit.tree import build_tree, level_order
from algokit.structures import LRUCache

three_sum([-1, 0, 1, 2, -1, -4])       # [[-1, -1, 2], [-1, 0, 1]]
eval_rpn(["2", "1", "+", "3", "*"])    # 9

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                     # [7, 0, 8]

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                      # [[3], [9, 20], [15, 7]]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                           # 1
cache.put(3, 3)                        # evicts key 2
cache.get(2)                           # -1
```

## Behaviour worth knowing

- `two_sum` returns `[i, j]` with the later index first, or `[]` when no
  pair exists. `two_sum_sorted` returns 1-based indices.
- `merge_sorted`, `reverse_string`, `invert_tree` and `reorder_list` change
  their argument in place. `merge_k_lists`, `reverse_k_group` and
  `add_two_numbers` reuse the nodes they are given.
- `build_list` and `build_tree` make test data from plain values;
  `build_tree` takes level-order values with `None` for a missing child.
  `list_values` reads a list back.
- `first_bad_version(n, is_bad)` takes the predicate as an argument.
- `LRUCache.get` returns `-1` for a missing key; `KthLargest.add` returns
  the k-th largest value seen so far.

## Errors

- `eval_rpn` raises `ValueError` for a bad token or a malformed expression
  and `ZeroDivisionError` when dividing by zero; division truncates toward
  zero.
- `ValueError` is raised for empty input to `max_area`, `find_duplicate`,
  `search_matrix`, `find_min`, `min_eating_speed` and `num_islands`; for a
  negative argument to `judge_square_sum`; for an out-of-range `n` in
  `remove_nth_from_end`; for `k < 1` in `reverse_k_group` and `KthLargest`;
  for a capacity below 1 in `LRUCache`; and for position and speed lists of
  different lengths in `car_fleet`.
- `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack.
import operator
from functools import cmp_to_key

NAMES = ["Chris", "Alex", "Ewa", "Barry", "Daniella"]


def backward(s1, s2):
    return s1 > s2


# sorts with a "comes before" predicate instead of a key function; ties keep
# their original order
def sorted_by(items, are_in_increasing_order):
    def compare(a, b):
        if are_in_increasing_order(a, b):
            return -1
        if are_in_increasing_order(b, a):
            return 1
        return 0

    return sorted(items, key=cmp_to_key(compare))


def by_named_function(names):
    return sorted_by(names, backward)


def by_closure_expression(names):
    def greater(s1: str, s2: str) -> bool:
        return s1 > s2

    return sorted_by(names, greater)


def by_inferred_closure(names):
    def greater(s1, s2):
        return s1 > s2

    return sorted_by(names, greater)


def by_implicit_return(names):
    return sorted_by(names, lambda s1, s2: s1 > s2)


def by_shorthand_arguments(names):
    return sorted_by(names, lambda *a: a[0] > a[1])


def by_operator_method(names):
    return sorted_by(names, operator.gt)


#in the order the tutorial walks through them
SORT_FORMS = [
    ("named function", by_named_function),
    ("closure expression", by_closure_expression),
    ("inferred types", by_inferred_closure),
    ("implicit return", by_implicit_return),
    ("shorthand arguments", by_shorthand_arguments),
    ("operator method", by_operator_method),
]

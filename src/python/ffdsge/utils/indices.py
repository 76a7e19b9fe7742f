from collections import OrderedDict
from ..errors import DuplicateNameError

def anticipated_names(prefix, n):
    """
    Names for `n` anticipated-shock slots: prefix1, prefix2, ..., prefixn,
    in ascending order of the numeric suffix.
    """
    return [f"{prefix}{i}" for i in range(1, n + 1)]

def build_indices(base_names, anticipated=(), offset=0):
    """
    Assigns positions to names in the order base_names + anticipated.

    Args:
        base_names: literal names, in matrix order
        anticipated: generated names appended after the literal ones
        offset: position of the first name (the augmented-state table starts
                after the last endogenous state)

    Returns:
        A new OrderedDict name -> position. Callers replace the table they
        are rebuilding with it, so rebuilding never duplicates entries.
    """
    table = OrderedDict()
    for i, name in enumerate(list(base_names) + list(anticipated)):
        if name in table:
            raise DuplicateNameError(f"Duplicate index name '{name}'")
        table[name] = i + offset
    return table

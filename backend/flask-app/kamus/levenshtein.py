"""
Levenshtein (edit) distance between two words.

Characters are compared as plain code points; no locale collation.
"""


def distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions that turn `a` into `b`.

    Classic (len(a)+1) x (len(b)+1) table:
      table[i][0] = i, table[0][j] = j
      table[i][j] = table[i-1][j-1]                       if a[i-1] == b[j-1]
                  = 1 + min(diag, left, up)               otherwise
    """
    rows = len(a) + 1
    cols = len(b) + 1
    table = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        ca = a[i - 1]
        prev = table[i - 1]
        cur = table[i]
        for j in range(1, cols):
            if ca == b[j - 1]:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j - 1], cur[j - 1], prev[j])
    return table[rows - 1][cols - 1]


def bounded_distance(a: str, b: str, max_distance: int) -> int:
    """
    Same result as distance() whenever that result is <= max_distance.
    Otherwise returns max_distance + 1 as soon as the bound is provably
    exceeded (length difference, or every cell of a row above the bound).
    Uses two rows instead of the full table.
    """
    if a == b:
        return 0
    if abs(len(a) - len(b)) > max_distance:
        return max_distance + 1

    # keep the inner loop over the shorter word
    if len(a) < len(b):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        ca = a[i - 1]
        cur = [i]
        row_min = i
        for j in range(1, len(b) + 1):
            if ca == b[j - 1]:
                val = prev[j - 1]
            else:
                val = 1 + min(prev[j - 1], cur[j - 1], prev[j])
            cur.append(val)
            if val < row_min:
                row_min = val
        if row_min > max_distance:
            return max_distance + 1
        prev = cur

    result = prev[-1]
    return result if result <= max_distance else max_distance + 1

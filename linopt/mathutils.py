"""Small integer helpers."""


def fact(n: int) -> int:
    """
    n! as an exact int.

    Any n <= 1, including negative n, gives 1.
    """
    result = 1
    while n > 1:
        result *= n
        n -= 1
    return result

"""
Fast Combine — обобщённое быстрое возведение в степень

double_and_add вычисляет n-кратную комбинацию элемента с самим собой
(elem op elem op ... op elem) за O(log2 n) применений op.

Требования к op:
1. op ассоциативна
2. unit — нейтральный элемент op

Коммутативность НЕ требуется: комбинируются только степени одного и того же
элемента, а elem^i и elem^j всегда коммутируют между собой.
"""

from typing import Callable, TypeVar

from lcg_predict.core.config import validate_step_count

T = TypeVar("T")


def double_and_add(elem: T, n: int, op: Callable[[T, T], T], unit: T) -> T:
    """
    n-кратная комбинация elem под ассоциативной операцией op.

    Алгоритм (right-to-left binary):
        result = unit, var = elem
        для каждого бита n (от младшего к старшему):
            бит установлен → result = op(result, var)
            var = op(var, var)

    Args:
        elem: Элемент
        n: Число повторений, целое в [0, 2^64)
        op: Ассоциативная бинарная операция
        unit: Нейтральный элемент op

    Returns:
        elem op ... op elem (n раз); unit при n == 0

    Raises:
        ValueError: Если n отрицательное или не помещается в 64 бита

    Examples:
        >>> double_and_add(3, 4, lambda x, y: x * y, 1)
        81
        >>> double_and_add("ab", 3, lambda x, y: x + y, "")
        'ababab'
        >>> double_and_add(5, 0, lambda x, y: x + y, 0)
        0
    """
    validate_step_count(n)

    result = unit
    var_elem = elem
    while n != 0:
        if n & 1:
            result = op(result, var_elem)
        var_elem = op(var_elem, var_elem)
        n >>= 1
    return result

"""
Модуль содержащий реализацию алгоритма бинарного
поиска в отсортированном массиве целых чисел
"""
import logging
from collections.abc import Mapping
from typing import Optional, Sequence

import cython

logger = logging.getLogger(__name__)

NOT_FOUND = -1


class InvalidSequenceError(TypeError):
    """Передан отсутствующий или неиндексируемый массив"""


def _length(sequence: Sequence[int]) -> int:
    """
    Проверяет, что массив пригоден для поиска, и возвращает его длину
    :param sequence: массив данных
    :return: длина массива
    :raises InvalidSequenceError: если массив отсутствует, не индексируется
        целыми числами или не имеет длины
    """
    if sequence is None:
        logger.debug("rejected sequence: None")
        raise InvalidSequenceError("sequence is None")
    if not hasattr(sequence, "__getitem__") or isinstance(sequence, Mapping):
        logger.debug("rejected sequence of type %s", type(sequence).__name__)
        raise InvalidSequenceError(
            "sequence of type %s is not indexable" % type(sequence).__name__)
    try:
        return len(sequence)
    except TypeError as exc:
        logger.debug("rejected sequence of type %s", type(sequence).__name__)
        raise InvalidSequenceError(
            "sequence of type %s has no length" % type(sequence).__name__) from exc


@cython.locals(low=cython.Py_ssize_t, high=cython.Py_ssize_t,
               mid=cython.Py_ssize_t)
def search(sequence: Sequence[int], key: int) -> Optional[int]:
    """
    Выполняет бинарный поиск по отсортированному массиву
    :param sequence: неубывающий массив целых чисел
    :param key: искомое значение
    :return: индекс найденного элемента или None
    :raises InvalidSequenceError: если массив отсутствует
    """
    low = 0
    high = _length(sequence) - 1

    while low <= high:
        mid = low + (high - low) // 2
        value = sequence[mid]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def find(sequence: Sequence[int], key: int) -> int:
    """
    То же, что search, но вместо None возвращает NOT_FOUND (-1)
    :param sequence: неубывающий массив целых чисел
    :param key: искомое значение
    :return: индекс найденного элемента или -1
    """
    index = search(sequence, key)
    if index is None:
        return NOT_FOUND
    return index

# -*- coding: utf-8 -*-
"""
組合せ（k 部分集合）を列挙するモジュールです。

n ビットのカーソルを 0 から 2^n - 1 まで進め、
各カーソルのグレイコード（https://en.wikipedia.org/wiki/Gray_code）の
立っているビット数が k に一致したものだけを返します。

n=3, k=2 なら次の順になります。

    [0, 1], [1, 2], [0, 2]
"""

from __future__ import annotations

from typing import Iterator

from ..types import Indices


def gray_code(n: int) -> int:
    """n 番目のグレイコードを返します。"""
    return n ^ (n >> 1)


def count_bits(n: int) -> int:
    """立っているビットの数（population count）を返します。"""
    return bin(n).count("1")


class Combination(Iterator[Indices]):
    """
    [0, 1, ..., n-1] から k 個を選ぶすべての組合せを返すイテレータ。

    各組合せは昇順のインデックスのリストです。

    Parameters
    ----------
    n : int
        要素数（0 以上）。
    k : int
        選ぶ個数（0 以上）。

    Notes
    -----
    - k > n のときは何も返しません（エラーにはしません）。
    - n = k = 0 のときは空リストを 1 回だけ返します。
      これは走査のしかたから自然に出てくる結果なので、特別扱いしていません。
    """

    def __init__(self, n: int, k: int) -> None:
        if n < 0 or k < 0:
            raise ValueError(f"n and k must be non-negative: n={n}, k={k}")

        self.n = n
        self.k = k
        self._i = 0
        self._end = 1 << n

    def __iter__(self) -> "Combination":
        return self

    def __next__(self) -> Indices:
        while self._i < self._end:
            cur = gray_code(self._i)
            self._i += 1
            # ビット数が k に一致するビット集合だけを返す
            if count_bits(cur) == self.k:
                return [j for j in range(self.n) if cur & (1 << j)]

        raise StopIteration

    def __repr__(self) -> str:
        return f"Combination(n={self.n}, k={self.k})"

# -*- coding: utf-8 -*-
"""
順列を列挙するモジュールです。

Heap のアルゴリズム（https://en.wikipedia.org/wiki/Heap%27s_algorithm）の
非再帰版を、Python のイテレータとして実装しています。

生成順は固定で、n=3 なら次の順に返します。

    [0, 1, 2], [1, 0, 2], [2, 0, 1], [0, 2, 1], [1, 2, 0], [2, 1, 0]

単語探索の結果の順序はこの生成順に依存するので、
アルゴリズムの細部（どの位置を入れ替えるか）を変えてはいけません。
"""

from __future__ import annotations

from typing import Iterator, List

from ..types import Indices


class Permutation(Iterator[Indices]):
    """
    長さ n の並び [0, 1, ..., n-1] のすべての順列を返すイテレータ。

    Parameters
    ----------
    n : int
        並びの長さ（0 以上）。n=0 のときは空リストを 1 回だけ返します。

    Notes
    -----
    - 最初に返すのは必ず恒等順列 [0, 1, ..., n-1] です。
    - 全部で n! 個を 1 回ずつ返し、その後は StopIteration を出し続けます。
    - 返すリストは毎回コピーなので、呼び出し側で書き換えても構いません。
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative: {n}")

        self.n = n
        # 現在の並び
        self._v: List[int] = list(range(n))
        # 深さごとの制御カウンタ
        self._c: List[int] = [0] * n
        self._i = 0
        self._first = True

    def __iter__(self) -> "Permutation":
        return self

    def __next__(self) -> Indices:
        # 初期状態そのものが最初の順列
        if self._first:
            self._first = False
            return list(self._v)

        v, c = self._v, self._c
        while self._i < self.n:
            i = self._i
            if c[i] < i:
                if i % 2 == 0:
                    v[0], v[i] = v[i], v[0]
                else:
                    v[c[i]], v[i] = v[i], v[c[i]]
                c[i] += 1
                self._i = 0
                return list(v)

            c[i] = 0
            self._i += 1

        raise StopIteration

    def __repr__(self) -> str:
        return f"Permutation(n={self.n})"

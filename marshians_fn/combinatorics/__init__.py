# -*- coding: utf-8 -*-
"""
marshians_fn.combinatorics パッケージ

組合せ論的な列挙器をまとめたサブパッケージです。
- permutation.py : Heap のアルゴリズムによる順列の列挙
- combination.py : グレイコードによる k 部分集合の列挙

どちらも「位置（0 始まりのインデックス）」を返すので、
添字でアクセスできるものなら何にでも使えます。

    >>> letters = "abc"
    >>> ["".join(letters[i] for i in p) for p in Permutation(3)]
    ['abc', 'bac', 'cab', 'acb', 'bca', 'cba']
"""

from .combination import Combination, count_bits, gray_code
from .permutation import Permutation

__all__ = ["Combination", "Permutation", "count_bits", "gray_code"]

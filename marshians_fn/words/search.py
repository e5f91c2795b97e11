# -*- coding: utf-8 -*-
"""
文字の並びから単語を探すモジュールです。

組合せ（Combination）と順列（Permutation）を組み合わせて、
文字の部分集合のすべての並べ替えを作り、辞書にあるものだけを集めます。

ざっくり流れ
------------
1. 使う文字数 x を min_letters から len(letters) まで増やしていく
2. x 個の位置の組合せを Combination の順に取り出す
3. その位置の並べ替えを Permutation の順に取り出す
4. 並べ替えた文字列が辞書にあり、まだ出していなければ結果に追加

探索量は文字数に対して階乗的に増えるので、
実用的には 12〜15 文字程度までを想定しています。
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Set

from ..combinatorics import Combination, Permutation
from ..logging_utils import get_logger
from ..types import Dictionary

logger = get_logger()


def candidate_strings(letters: Sequence[str], min_letters: int) -> Iterator[str]:
    """
    辞書と照合する前の候補文字列を、探索順にすべて生成します。

    同じ文字が複数あっても位置ごとに別物として扱うので、
    同じ文字列が何度も出てくることがあります。
    """
    n = len(letters)
    for x in range(min_letters, n + 1):
        for c in Combination(n, x):
            for p in Permutation(len(c)):
                yield "".join(letters[c[i]] for i in p)


def words(dictionary: Dictionary, letters: Sequence[str], min_letters: int) -> List[str]:
    """
    letters から作れる単語のうち、辞書にあるものを返します。

    Parameters
    ----------
    dictionary : set[str]
        単語辞書。完全一致でのみ照合します（大文字小文字や空白の正規化はしない）。
    letters : str
        使える文字の並び。重複があってもよい。
    min_letters : int
        単語の最小文字数。

    Returns
    -------
    list[str]
        見つかった単語。最初に見つかった順で、重複はありません。
    """
    seen: Set[str] = set()
    results: List[str] = []

    for s in candidate_strings(letters, min_letters):
        if s in dictionary and s not in seen:
            seen.add(s)
            results.append(s)

    logger.debug(
        "words: letters=%d, min=%d, found=%d", len(letters), min_letters, len(results)
    )
    return results

# -*- coding: utf-8 -*-
"""
marshians_fn パッケージの入口となるモジュールです。

    from marshians_fn import solve, words, load_dictionary

と呼び出されることを想定しています。

- solve()           : 数独の盤面文字列を解く
- words()           : 文字の並びから辞書にある単語を探す
- load_dictionary() : 単語辞書を読み込む
"""

from __future__ import annotations

from .combinatorics import Combination, Permutation
from .dictionary import load_dictionary
from .sudoku import Board, InvalidBoardError, SudokuError, UnsolvableError, solve
from .words import words

__all__ = [
    "Board",
    "Combination",
    "InvalidBoardError",
    "Permutation",
    "SudokuError",
    "UnsolvableError",
    "load_dictionary",
    "solve",
    "words",
]

__version__ = "0.1.0"

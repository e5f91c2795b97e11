# -*- coding: utf-8 -*-
"""
盤面文字列を内部表現に変換するモジュールです。

盤面文字列は 81 文字の数字の並び（行優先、'0' が空きマス）で、
これを shape = (9, 9) の numpy 配列に変換します。
"""

from __future__ import annotations

import re

import numpy as np

from ..config import BOARD_CELLS, BOARD_SIZE
from .errors import InvalidBoardError

# ASCII の数字だけからなる文字列（全角数字などは含めない）
DIGITS_RE = re.compile(r"[0-9]*", re.ASCII)

INVALID_LENGTH = f"string must be exactly {BOARD_CELLS} characters"
INVALID_CHARACTER = "string must contain only digits (zero for empty)"


def validate_board_string(s: str) -> None:
    """
    盤面文字列の形式をチェックします。

    長さのチェックを先に行い、次に文字種をチェックします。
    不正な場合は InvalidBoardError を送出します。
    """
    if len(s) != BOARD_CELLS:
        raise InvalidBoardError(INVALID_LENGTH)
    if DIGITS_RE.fullmatch(s) is None:
        raise InvalidBoardError(INVALID_CHARACTER)


def parse_board(s: str) -> np.ndarray:
    """
    盤面文字列を 9x9 の numpy 配列に変換します。

    Parameters
    ----------
    s : str
        81 文字の盤面文字列。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int8 の配列。0 は空きマス。
    """
    validate_board_string(s)

    grid = np.array([int(ch) for ch in s], dtype=np.int8)
    return grid.reshape(BOARD_SIZE, BOARD_SIZE)


def format_board(grid: np.ndarray) -> str:
    """9x9 の配列を 81 文字の盤面文字列に戻します。"""
    return "".join(str(int(n)) for n in grid.flat)

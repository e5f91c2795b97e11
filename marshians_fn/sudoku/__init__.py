# -*- coding: utf-8 -*-
"""
marshians_fn.sudoku パッケージ

9x9 の数独を解くサブパッケージです。
- parser.py : 盤面文字列のチェックと numpy 配列への変換
- board.py  : Board クラス（バックトラッキング探索）
- errors.py : 例外クラス

    >>> solve(
    ...     "120400586060201403040096000090000014081000360"
    ...     "430000070000720030608903040372008051"
    ... )
    '129437586867251493543896127795362814281574369436189275914725638658913742372648951'
"""

from __future__ import annotations

from ..logging_utils import get_logger
from .board import Board
from .errors import InvalidBoardError, SudokuError, UnsolvableError

__all__ = [
    "Board",
    "InvalidBoardError",
    "SudokuError",
    "UnsolvableError",
    "solve",
]

logger = get_logger()


def solve(board: str) -> str:
    """
    盤面文字列を受け取り、解いた盤面文字列を返します。

    Parameters
    ----------
    board : str
        81 文字の盤面文字列（'0' が空きマス）。

    Returns
    -------
    str
        解いた盤面（81 文字、'1'〜'9'）。

    Raises
    ------
    InvalidBoardError
        盤面文字列の長さや文字が不正な場合。探索は行いません。
    UnsolvableError
        形式は正しいが解が存在しない場合。
    """
    b = Board(board)

    if not b.solve():
        logger.info("Board is not solvable (placements=%d).", b.placements)
        raise UnsolvableError()

    logger.debug("Board solved (placements=%d).", b.placements)
    return str(b)

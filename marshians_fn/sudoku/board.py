# -*- coding: utf-8 -*-
"""
数独の盤面を表し、バックトラッキングで解くモジュールです。

探索の流れ
----------
1. 行優先で「次の空きマス」を探す（なければ完成チェックをして終了）
2. そのマスに 1〜9 を小さい順に試す
3. 行・列・ボックスに同じ数字がなければ仮に置き、次の空きマスへ再帰
4. 9 個すべて失敗したらマスを空に戻して呼び出し元に失敗を返す

制約伝播は行いません（直接の衝突チェックのみ）。
試す順序が固定なので、解が複数ある盤面では
「行優先・小さい数字優先」で最初に見つかる解を必ず返します。
再帰の深さは最大でも 81 です。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import BOARD_CELLS, BOARD_SIZE, BOX_SIZE, EMPTY_CELL
from .parser import format_board, parse_board


class Board:
    """
    9x9 の数独盤面。

    Parameters
    ----------
    s : str
        81 文字の盤面文字列（'0' が空きマス）。
        形式が不正な場合は InvalidBoardError を送出します。

    Attributes
    ----------
    cells : list[int]
        行優先の 81 マス。solve() によってその場で書き換えられます。
        探索の内側のループで使うので numpy 配列ではなく list で持ちます。
    placements : int
        solve() 中に仮置きした回数（ログ用）。
    """

    def __init__(self, s: str) -> None:
        self.cells: List[int] = parse_board(s).ravel().tolist()
        self.placements = 0

    @property
    def grid(self) -> np.ndarray:
        """現在の盤面を shape = (9, 9) の配列（コピー）で返します。"""
        return np.array(self.cells, dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)

    def valid(self, p: int, n: int) -> bool:
        """
        位置 p に数字 n を置いても衝突しないかどうかを返します。

        p 自身のマスは比較対象から除きます。
        """
        y, x = divmod(p, BOARD_SIZE)
        cells = self.cells

        # 行と列（自分自身は除く）
        for i in range(BOARD_SIZE):
            if i != x and cells[y * BOARD_SIZE + i] == n:
                return False
            if i != y and cells[i * BOARD_SIZE + x] == n:
                return False

        # 自分を含むボックス
        y0 = (y // BOX_SIZE) * BOX_SIZE
        x0 = (x // BOX_SIZE) * BOX_SIZE
        for yy in range(y0, y0 + BOX_SIZE):
            for xx in range(x0, x0 + BOX_SIZE):
                if (yy != y or xx != x) and cells[yy * BOARD_SIZE + xx] == n:
                    return False
        return True

    def solved(self) -> bool:
        """すべてのマスが埋まり、どのマスも衝突していなければ True。"""
        for p, n in enumerate(self.cells):
            if n == EMPTY_CELL or not self.valid(p, n):
                return False
        return True

    def solve(self) -> bool:
        """
        盤面を解きます。

        解けた場合は True を返し、cells は完成した盤面になります。
        解がない場合は False を返し、空きマスは元の 0 に戻ります。
        """
        return self._solve_from(self._next_unsolved(0))

    def _next_unsolved(self, p: int) -> int:
        # p 以降で最初の空きマス。なければ BOARD_CELLS
        cells = self.cells
        for i in range(p, BOARD_CELLS):
            if cells[i] == EMPTY_CELL:
                return i
        return BOARD_CELLS

    def _solve_from(self, p: int) -> bool:
        if p == BOARD_CELLS:
            return self.solved()

        for n in range(1, BOARD_SIZE + 1):
            if self.valid(p, n):
                self.cells[p] = n
                self.placements += 1

                if self._solve_from(self._next_unsolved(p + 1)):
                    return True

        # どの数字もだめだったので、このマスは空に戻して後戻り
        self.cells[p] = EMPTY_CELL
        return False

    def __str__(self) -> str:
        return format_board(self.grid)

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    __hash__ = None  # type: ignore[assignment]

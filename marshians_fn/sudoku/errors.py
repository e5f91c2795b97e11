# -*- coding: utf-8 -*-
"""
数独ソルバーが送出する例外をまとめたモジュールです。
"""

from __future__ import annotations


class SudokuError(Exception):
    """数独ソルバーの例外の基底クラス。"""


class InvalidBoardError(SudokuError, ValueError):
    """
    盤面文字列が不正なときの例外です。

    探索を始める前（盤面の構築時）に送出されます。
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid board: {self.reason}"


class UnsolvableError(SudokuError):
    """盤面の形式は正しいが、解が存在しないときの例外です。"""

    def __str__(self) -> str:
        return "board is not solvable"

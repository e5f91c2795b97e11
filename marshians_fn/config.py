# -*- coding: utf-8 -*-
"""
marshians_fn 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここ（または環境変数）を変更することで
- 辞書ファイルの場所
- 単語探索の最小文字数
- 受け付ける文字数の上限
- サーバのホスト / ポート
などを簡単に変更できます。
"""

from __future__ import annotations

import os

# ==== 数独盤面関連 =========================================================

# 盤面の一辺のマス数（9x9 固定）
BOARD_SIZE: int = 9

# ボックス（小さい正方形）の一辺のマス数
BOX_SIZE: int = 3

# 盤面文字列の長さ
BOARD_CELLS: int = BOARD_SIZE * BOARD_SIZE

# 空きマスを表す数字
EMPTY_CELL: int = 0

# ==== 辞書ファイル関連 =====================================================

# 単語リストのパス（1行1単語、または 'word' 列を持つ CSV）
DICTIONARY_PATH: str = os.getenv("DICTIONARY_PATH", "words.txt")

# ==== 単語探索関連 =========================================================

# letters-to-words で min が省略されたときの最小文字数
DEFAULT_MIN_LETTERS: int = 3

# 一度に受け付ける文字数の上限。
# 探索量は文字数に対して階乗的に増えるので、大きくしすぎないこと。
MAX_LETTERS: int = int(os.getenv("MAX_LETTERS", "12"))

# ==== Web サーバ関連 =======================================================

# フロントエンド（静的ファイル）のディレクトリ
UI_DIR: str = os.getenv("UI_DIR", "ui")

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))

# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

marshians_fn パッケージのどこからでも

    from .logging_utils import get_logger
    logger = get_logger()

として同じロガーを使います。

主に次のようなことを記録します。
- 辞書の読み込み（ファイルのパスと単語数）
- 数独の解答結果（解けたかどうかと、仮置きした回数）
- 単語探索の文字数とヒット数（DEBUG レベル）
"""

from __future__ import annotations

import logging

# marshians_fn パッケージ共通で使うロガー名
LOGGER_NAME = "marshians_fn"


def get_logger() -> logging.Logger:
    """
    marshians_fn 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger

# -*- coding: utf-8 -*-
"""
単語辞書を読み込むモジュールです。

対応する形式：
- テキスト（.txt など）: 1 行 1 単語。行の内容をそのまま単語として使う
- CSV（.csv）          : 'word' 列を持つ表。pandas で読み込む

どちらの場合も大文字小文字や前後の空白の正規化は行いません。
単語探索では完全一致でしか照合しないので、辞書側で整えておくこと。
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet

import pandas as pd

from ..logging_utils import get_logger

logger = get_logger()


def _load_text(p: Path) -> FrozenSet[str]:
    # splitlines() は末尾の改行で空の単語を作らない
    return frozenset(p.read_text(encoding="utf-8").splitlines())


def _load_csv(p: Path) -> FrozenSet[str]:
    # "null" や "nan" のような単語を欠損値にしないよう、すべて文字列のまま読む
    df = pd.read_csv(
        p,
        encoding="utf-8-sig",
        dtype=str,
        keep_default_na=False,
        low_memory=False,
    )

    if "word" not in df.columns:
        raise ValueError("Dictionary CSV must have a 'word' column.")

    df = df.drop_duplicates(subset=["word"], keep="first")
    return frozenset(df["word"].tolist())


def load_dictionary(path: str | Path) -> FrozenSet[str]:
    """
    単語辞書を読み込み、所属判定用の集合にして返します。

    Parameters
    ----------
    path : str or Path
        辞書ファイルのパス。拡張子が .csv なら CSV として読みます。

    Returns
    -------
    frozenset[str]
        単語の集合。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dictionary file not found: {p}")

    if p.suffix.lower() == ".csv":
        words = _load_csv(p)
    else:
        words = _load_text(p)

    logger.info("Dictionary loaded: %s (%d entries)", p, len(words))
    return words

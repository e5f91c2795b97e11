# -*- coding: utf-8 -*-
"""
marshians_fn で使う主なデータ構造（型）をまとめたモジュールです。
"""

from __future__ import annotations

from typing import AbstractSet, List

# 列挙器が返す「位置（インデックス）」の並び
Indices = List[int]

# 単語辞書。完全一致の所属判定だけができればよい
Dictionary = AbstractSet[str]

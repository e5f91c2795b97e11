# -*- coding: utf-8 -*-
"""
marshians_fn.words パッケージ

与えられた文字の並びから、辞書に載っている単語を探すサブパッケージです。
"""

from .search import candidate_strings, words

__all__ = ["candidate_strings", "words"]

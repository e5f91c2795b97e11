# -*- coding: utf-8 -*-
"""
marshians_fn.dictionary パッケージ

単語辞書の読み込みを行うサブパッケージです。
"""

from .loader import load_dictionary

__all__ = ["load_dictionary"]

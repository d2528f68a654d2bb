"""Identifier Generator — tests for uniqueness, format, and reservation."""

import re
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from app.infrastructure.id_generator import IdGenerator


def test_ids_are_32_char_hex():
    assert re.fullmatch(r"[0-9a-f]{32}", IdGenerator().next())


def test_ids_are_unique():
    gen = IdGenerator()
    ids = {gen.next() for _ in range(2000)}
    assert len(ids) == 2000


def test_ids_unique_across_threads():
    gen = IdGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: gen.next(), range(800)))
    assert len(set(ids)) == 800


def test_collision_is_redrawn():
    gen = IdGenerator()
    with patch(
        "app.infrastructure.id_generator.secrets.token_hex",
        side_effect=["aa", "aa", "bb"],
    ):
        assert gen.next() == "aa"
        assert gen.next() == "bb"


def test_reserved_ids_are_never_issued():
    gen = IdGenerator()
    gen.reserve("cc")
    assert "cc" in gen
    with patch(
        "app.infrastructure.id_generator.secrets.token_hex",
        side_effect=["cc", "dd"],
    ):
        assert gen.next() == "dd"

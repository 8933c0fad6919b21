"""Shared fixtures: sample CREATE TABLE statements as SHOW CREATE TABLE prints them."""

from __future__ import annotations

from pathlib import Path

import pytest


USERS_DDL = (
    "CREATE TABLE `users` (\n"
    "  `id` int NOT NULL,\n"
    "  `name` varchar(32) DEFAULT NULL COMMENT 'Full name',\n"
    "  PRIMARY KEY (`id`)\n"
    ")"
)

ORDERS_DDL = """\
-- dumped from shop
CREATE TABLE `order_item` (
  `order_id` int(11) NOT NULL COMMENT 'Owning order',
  `item_no` int(11) NOT NULL,
  `sku` varchar(64) NOT NULL COMMENT 'Stock keeping unit',
  `price` decimal(10,2) DEFAULT NULL,
  `weight` double DEFAULT NULL,
  `shipped_at` datetime DEFAULT NULL,
  `created_at` datetime NOT NULL,
  `note` text,
  PRIMARY KEY (`order_id`,`item_no`),
  KEY `idx_sku` (`sku`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='Order lines';
"""


@pytest.fixture
def users_ddl() -> str:
    return USERS_DDL


@pytest.fixture
def orders_ddl() -> str:
    return ORDERS_DDL


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside an empty temporary directory, like a fresh checkout."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

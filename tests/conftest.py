"""Root test configuration: sample Docusaurus tree shared by walker and CLI tests"""

import logging
from pathlib import Path

import pytest


PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x01\x02\xff"

INTRO_MD = """\
---
title: "Intro"
sidebar_position: 1
---

# Intro

:::tip Getting started
Read this first.
:::
"""

GUIDE_MD = """\
---
sidebar_position: 2
---

:::danger
Do not do this.
:::

![diagram](./img/d.png)
"""


@pytest.fixture(name="docs_tree")
def docs_tree_fixture(tmp_path) -> Path:
    """Build {a.md, b/c.md, b/img/d.png} under tmp_path/docs and return the root."""
    root = tmp_path / "docs"
    (root / "b" / "img").mkdir(parents=True)
    (root / "a.md").write_text(INTRO_MD)
    (root / "b" / "c.md").write_text(GUIDE_MD)
    (root / "b" / "img" / "d.png").write_bytes(PNG_BYTES)
    return root


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop stream handlers the CLI installs so later tests don't log to a closed runner stream."""
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)

"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_MD = """\
---
title: "X"
sidebar_position: 3
---

# Heading

:::note My Title
Body
:::

```markdown
:::warning
inside a code sample
:::
```

:::custom
text
:::
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("commonmark")


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD

import logging

import pytest

from mdadf.config import CONFIGURATION, ApplicationConfiguration
from mdadf.constants import LOGGER_NAME


@pytest.fixture(autouse=True)
def mock_configuration(monkeypatch):
    for name in ('MDADF_CONFIG_FILE', 'MDADF_LOG_FILE', 'MDADF_LOG_LEVEL', 'MDADF_JSON_INDENT'):
        monkeypatch.delenv(name, raising=False)

    config = ApplicationConfiguration(
        log_file=None,
        log_level='WARNING',
        json_indent=None,
        ensure_ascii=False,
    )

    token = CONFIGURATION.set(config)

    yield config

    CONFIGURATION.reset(token)


# NOTE: the CLI attaches file handlers to the library logger; remove them so log files
#       from one test are not written by the next one.
@pytest.fixture(autouse=True)
def clear_logger_handlers():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def markdown_description():
    """Comprehensive GitHub Flavored Markdown document for testing Markdown to ADF conversion."""
    return """# GitHub Flavored Markdown (GFM) All-in-One Test

## 1. Quotes

> **Note:** Highlights information that users should take into account, even when skimming.

> **Tip:** Optional information to help a user be more successful.
>
> > Nested quote with a [link](https://github.com).

---

## 2. Text Formatting

**Bold Text** *Italic Text* ***Bold and Italic*** ~~Strikethrough~~ **Bold and ~~Strikethrough~~** `Inline Code`

Line one with a hard break\\
line two with a soft
break.

---

## 3. Lists

### Nested Lists

1. First item
    - Unordered sub-item
    - Another sub-item
2. Second item
    1. Ordered sub-item A
    2. Ordered sub-item B

---

## 4. Code Blocks

### Syntax Highlighting (JavaScript)

```javascript
const greet = (name) => {
  console.log(`Hello, ${name}!`);
}
greet("GitHub");
```

### Syntax Highlighting (diff)

```diff
- const userStatus = "offline";
+ const userStatus = "online";
! const userStatus = "away"; // (Orange/Warning in some renderers)
# This is a comment/metadata line
```

## 5. Table

| Left Align | Center Align | Right Align |
|:-----------|:------------:|------------:|
| Item 1     | Value        | $100        |
| Item 2     | Value        | $50         |
| Item 3     |              | $10         |

# Links

See https://jira.example.com/browse/DEV-456 for details, or <https://jira.example.com/browse/DEV-123>.

Contact <user@example.com> or [the team](https://example.com/team).

![Architecture diagram](https://example.com/diagram.png)

<div>raw html is dropped</div>

## 6. Emojis

😀 🚀
"""

# Tagflag CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizer for the tag micro-language attached to destination fields.

A tag is a comma-separated list of directives:

    "short=F,long=full-time,conflicts-with=part_time,description='Full time, paid'"

Splitting rules:
- Unquoted commas separate directives.
- Text between single quotes is literal; commas inside it do not split.
  The quotes themselves are dropped.
- A backslash escapes the next character, including quotes, commas and
  backslashes.
- An unterminated quote is tolerated: the trailing text becomes the last directive.

The tokenizer does not interpret directives. Unknown keywords are reported by the
descriptor builder.
"""


def tokenize_tag(tag: str) -> list[str]:
    """
    Split a tag string into its directives.

    Args:
        tag (str): The raw tag text.

    Returns:
        list[str]: Directives in the order they appear, unescaped and unquoted.
    """
    directives: list[str] = []
    current: list[str] = []
    in_quotes = False
    escape_next = False

    for char in tag:
        if escape_next:
            current.append(char)
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == "'":
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            directives.append("".join(current))
            current = []
        else:
            current.append(char)

    if current:
        directives.append("".join(current))

    return directives

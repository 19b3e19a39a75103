"""Language-neutral tokenizer for the statistical classifier.

Token boundaries:

- string literals on a single line become ``<string>``
- numeric literals become ``<number>``
- identifiers, optionally prefixed by ``@``, ``#`` or ``$``
  (``@interface``, ``#include``, ``$self``) are kept verbatim
- runs of other punctuation are kept verbatim
- a leading shebang becomes ``SHEBANG#!<interpreter>``

Literal contents are dropped so that training data does not
overfit on the text inside strings.
"""

import re

from codelingo.utils.shebang import interpreter_from_shebang

STRING_TOKEN = "<string>"
NUMBER_TOKEN = "<number>"
SHEBANG_PREFIX = "SHEBANG#!"

DEFAULT_MAX_TOKENS = 100_000

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')
    | (?P<number>(?<![\w.])(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?))
    | (?P<word>[@\#$]?[A-Za-z_][A-Za-z0-9_]*)
    | (?P<punct>[^\w\s"']+)
    """,
    re.VERBOSE,
)


def tokenize(content: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> list[str]:
    """
    Split content into classifier tokens.

    Args:
        content: Text to tokenize.
        max_tokens: Upper bound on the number of tokens returned.

    Returns:
        Tokens in document order.
    """
    tokens: list[str] = []
    body = content

    if content.startswith("#!"):
        interpreter = interpreter_from_shebang(content)
        if interpreter:
            tokens.append(SHEBANG_PREFIX + interpreter)
        body = content.partition("\n")[2]

    for match in _TOKEN_PATTERN.finditer(body):
        if len(tokens) >= max_tokens:
            break
        kind = match.lastgroup
        if kind == "string":
            tokens.append(STRING_TOKEN)
        elif kind == "number":
            tokens.append(NUMBER_TOKEN)
        else:
            tokens.append(match.group())

    return tokens[:max_tokens]

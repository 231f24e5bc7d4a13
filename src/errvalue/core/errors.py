# src/errvalue/core/errors.py


class ErrvalueError(Exception):
    """Base application error for errvalue's CLI and configuration layers.

    Use this for predictable, user-facing failures that should be caught by
    the CLI and displayed nicely. It is unrelated to ``ErrorValue``, which is
    data and is never raised.
    """

    pass

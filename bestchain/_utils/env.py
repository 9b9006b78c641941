"""
Helpers for reading configuration out of the environment, adapted from
https://github.com/simpleenergy/env-excavator.
"""

import os
from typing import (
    Any,
    Type,
    Union,
)


class empty:
    """
    We use this sentinel object, instead of None, as None is a plausible value
    for a default in real Python code.
    """


def get_env_value(name: str, required: bool = False, default: Any = empty) -> str:
    """
    Core function for extracting the environment variable.

    Enforces mutual exclusivity between `required` and `default` keywords.

    The `empty` sentinal value is used as the default `default` value to allow
    other function to handle default/empty logic in the appropriate way.
    """
    if required and default is not empty:
        raise ValueError("Using `default` with `required=True` is invalid")
    elif required:
        try:
            value = os.environ[name]
        except KeyError:
            raise KeyError(f"Must set environment variable {name}")
    else:
        value = os.environ.get(name, default)
    return value


def env_string(
    name: str, required: bool = False, default: Union[Type[empty], str] = empty
) -> str:
    """
    Pulls an environment variable out of the environment returning it as a
    string. If not present in the environment and no default is specified, an
    empty string is returned.

    :param name: The name of the environment variable be pulled
    :type name: str

    :param required: Whether the environment variable is required. If ``True``
    and the variable is not present, a ``KeyError`` is raised.
    :type required: bool

    :param default: The value to return if the environment variable is not
    present. (Providing a default alongside setting ``required=True`` will raise
    a ``ValueError``)
    :type default: str
    """
    value = get_env_value(name, default=default, required=required)
    if value is empty:
        value = ""
    return value

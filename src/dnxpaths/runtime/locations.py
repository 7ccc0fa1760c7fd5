"""Candidate runtime home directories."""

from __future__ import annotations

import os
from typing import Iterator

from ..utils.environment import HostEnvironment
from .specs import FORMAT_GENERATIONS, RUNTIME_HOME_VARIABLES, USER_HOME_VARIABLES


def _iter_raw_locations(environment: HostEnvironment) -> Iterator[str]:
    for variable in RUNTIME_HOME_VARIABLES:
        yield environment.get(variable)

    for variable in USER_HOME_VARIABLES:
        home = environment.get(variable)
        if not home:
            continue
        # Newest convention first
        for generation in FORMAT_GENERATIONS:
            yield os.path.join(home, generation.subfolder_name)


def iter_runtime_locations(environment: HostEnvironment) -> Iterator[str]:
    """Yield the runtime home directories to search, in priority order.

    ``DNX_HOME`` and ``KRE_HOME`` come first, then the ``.dnx``, ``.k`` and
    ``.kre`` folders under each of ``HOME`` and ``USERPROFILE``. Unset or
    empty variables are skipped. Values are yielded with environment
    references expanded, since ``DNX_HOME`` might include ``%USERPROFILE%``.

    Args:
        environment: Host environment to read variables from

    Yields:
        Non-empty runtime home directories
    """
    for location in _iter_raw_locations(environment):
        if not location:
            continue
        expanded = environment.expand(location)
        if expanded:
            yield expanded

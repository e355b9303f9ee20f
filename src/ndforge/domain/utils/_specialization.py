"""
Rank-specialization cache.

Looping over the coordinates of an array of arbitrary rank normally means a
recursive walk or an odometer over an index list. This module instead turns a
*rank-parametric* loop-nest description (a :class:`LoopNestTemplate`) into a
Python function whose loop nest has exactly ``rank`` levels, compiles it the
first time that rank is requested, and memoizes it in a process-wide
:class:`SpecializationRegistry`.

Generated routines look like this for ``rank == 2``::

    def reduce_rank2(dims, get, ...):
        n1, n2, = dims
        <prologue>
        for i2 in range(1, n2 + 1):
            <hoist(2)>
            for i1 in range(1, n1 + 1):
                <hoist(1)>
                <body>
        return <epilogue>

Loop variables are 1-based coordinates. Axis ``rank`` is the outermost loop and
axis 1 the innermost, so a nest over a tensor's own shape visits elements in
increasing linear order.

Core idea
---------
- A template is keyed by its ``name``; the registry maps
  ``SpecKey(name, rank)`` to the compiled routine.
- The first request for a key builds it under the registry lock (with a
  double-checked lookup), so exactly one routine object per key is ever live.
- Entries are never evicted; realistic ranks are few and small.
"""

from __future__ import annotations

import keyword
import linecache
import logging
import re
import threading
from collections import namedtuple
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from .._errors import InvalidRankError

logger = logging.getLogger(__name__)

Lines = Union[str, Sequence[str]]

SpecKey = namedtuple("SpecKey", ["Template", "Rank"])
"""
Key identifying one specialized routine.

Fields
------
Template : str
    Name of the loop-nest template.
Rank : int
    Number of nested loops.
"""

_INDENT = "    "
_RESERVED = re.compile(r"^(dims|[in]\d+)$")


def loop_vars(rank: int) -> tuple[str, ...]:
    """Names of the loop variables for ``rank`` axes: ``("i1", ..., "iN")``."""
    return tuple(f"i{k}" for k in range(1, rank + 1))


def unpack(names: str, rank: int, source: str) -> str:
    """
    Source line binding ``{names}1, ..., {names}N`` from the tuple ``source``.

    Used by templates to spread per-axis captures into scalar locals.
    """
    return f"{', '.join(f'{names}{k}' for k in range(1, rank + 1))}, = {source}"


def _lines(chunk: Optional[Lines]) -> list[str]:
    if chunk is None:
        return []
    if isinstance(chunk, str):
        return chunk.splitlines()
    out: list[str] = []
    for line in chunk:
        out.extend(line.splitlines())
    return out


def check_rank(rank: Any) -> int:
    """
    Validate a rank for specialization.

    Raises
    ------
    InvalidRankError
        If ``rank`` is not an integer or is ``<= 0``.
    """
    if isinstance(rank, bool) or not isinstance(rank, Integral) or rank <= 0:
        raise InvalidRankError(rank)
    return int(rank)


@dataclass(frozen=True, eq=False)
class LoopNestTemplate:
    """
    Rank-parametric description of a loop nest.

    Parameters
    ----------
    name : str
        Template identity; also the stem of the generated function name.
    body : Callable[[Sequence[str]], Lines]
        Given the loop variable names, returns the innermost statement(s).
    captures : Sequence[str]
        Names of the arguments the routine takes after ``dims``.
    prologue : Callable[[int], Lines], optional
        Statements emitted before the outermost loop.
    hoist : Callable[[int, Sequence[str]], Lines], optional
        ``hoist(axis, loop_vars)`` returns statements emitted at the top of
        the loop over ``axis``, before any inner loop.
    epilogue : Callable[[int], str], optional
        Expression returned after the nest completes.
    namespace : Mapping[str, Any]
        Globals visible to the generated routine (helpers, exception types).

    Notes
    -----
    Builders must be pure functions of their arguments: the same rank always
    has to render the same source, otherwise memoization would be unsound.
    """

    name: str
    body: Callable[[Sequence[str]], Lines]
    captures: Sequence[str] = ()
    prologue: Optional[Callable[[int], Lines]] = None
    hoist: Optional[Callable[[int, Sequence[str]], Lines]] = None
    epilogue: Optional[Callable[[int], str]] = None
    namespace: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in self.captures:
            if not name.isidentifier() or keyword.iskeyword(name) or _RESERVED.match(name):
                raise ValueError(
                    f"Invalid capture name {name!r} for template {self.name!r}"
                )

    def function_name(self, rank: int) -> str:
        return f"{re.sub(r'[^0-9A-Za-z_]', '_', self.name)}_rank{rank}"

    def render(self, rank: int) -> str:
        """
        Render the Python source of the routine specialized to ``rank``.

        Raises
        ------
        InvalidRankError
            If ``rank <= 0``.
        """
        rank = check_rank(rank)
        variables = loop_vars(rank)
        bounds = ", ".join(f"n{k}" for k in range(1, rank + 1))
        params = ", ".join(("dims", *self.captures))

        src = [f"def {self.function_name(rank)}({params}):"]
        src.append(f"{_INDENT}{bounds}, = dims")
        src.extend(_INDENT + line for line in _lines(self.prologue and self.prologue(rank)))

        depth = 1
        for axis in range(rank, 0, -1):
            src.append(f"{_INDENT * depth}for i{axis} in range(1, n{axis} + 1):")
            depth += 1
            if self.hoist is not None:
                src.extend(_INDENT * depth + line for line in _lines(self.hoist(axis, variables)))

        body = _lines(self.body(variables)) or ["pass"]
        src.extend(_INDENT * depth + line for line in body)

        if self.epilogue is not None:
            src.append(f"{_INDENT}return {self.epilogue(rank)}")
        return "\n".join(src) + "\n"


def _build(template: LoopNestTemplate, rank: int) -> tuple[Callable[..., Any], str]:
    source = template.render(rank)
    filename = f"<ndforge:{template.name}:rank{rank}>"
    code = compile(source, filename, "exec")
    # Keep the source around so tracebacks through generated code show lines.
    linecache.cache[filename] = (len(source), None, source.splitlines(True), filename)
    namespace: Dict[str, Any] = dict(template.namespace)
    exec(code, namespace)
    return namespace[template.function_name(rank)], source


class SpecializationRegistry:
    """
    Process-wide memo of specialized loop-nest routines.

    The registry owns a mapping ``SpecKey(template name, rank) -> routine``
    and a single lock that serializes the build-if-absent step. Lookups of
    already-built routines do not take the lock.

    Notes
    -----
    - Template identity is the template *object*: registering two different
      templates under one name raises ``ValueError``.
    - There is no teardown; entries live for the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._routines: Dict[SpecKey, Callable[..., Any]] = {}
        self._sources: Dict[SpecKey, str] = {}
        self._templates: Dict[str, LoopNestTemplate] = {}
        self._lock = threading.Lock()
        self._build_count = 0

    def specialize(self, template: LoopNestTemplate, rank: int) -> Callable[..., Any]:
        """
        Return the routine for ``template`` at ``rank``, building it on first use.

        Parameters
        ----------
        template : LoopNestTemplate
            The loop-nest description.
        rank : int
            Number of nested loops (>= 1).

        Returns
        -------
        Callable
            ``routine(dims, *captures)``.

        Raises
        ------
        InvalidRankError
            If ``rank <= 0``.
        """
        rank = check_rank(rank)
        key = SpecKey(template.name, rank)
        routine = self._routines.get(key)
        if routine is not None and self._templates.get(template.name) is template:
            return routine

        with self._lock:
            known = self._templates.setdefault(template.name, template)
            if known is not template:
                raise ValueError(
                    f"A different template is already registered as {template.name!r}"
                )
            routine = self._routines.get(key)
            if routine is None:
                routine, source = _build(template, rank)
                self._routines[key] = routine
                self._sources[key] = source
                self._build_count += 1
                logger.debug(
                    "Specialized %s for rank %d (%d lines)",
                    template.name,
                    rank,
                    source.count("\n"),
                )
        return routine

    def is_cached(self, template: LoopNestTemplate, rank: int) -> bool:
        return SpecKey(template.name, rank) in self._routines

    def cached_ranks(self, template: LoopNestTemplate) -> tuple[int, ...]:
        """Ranks already built for ``template``, ascending."""
        return tuple(
            sorted(key.Rank for key in self._routines if key.Template == template.name)
        )

    def source(self, template: LoopNestTemplate, rank: int) -> str:
        """
        Generated source of a built routine.

        Raises
        ------
        KeyError
            If the routine has not been built yet.
        """
        return self._sources[SpecKey(template.name, rank)]

    @property
    def build_count(self) -> int:
        """Number of routines compiled by this registry so far."""
        return self._build_count

    def __contains__(self, key: object) -> bool:
        return key in self._routines

    def __len__(self) -> int:
        return len(self._routines)


SPECIALIZATIONS = SpecializationRegistry()
"""Default process-wide registry used by every ndforge operation."""


def specialize(
    template: LoopNestTemplate,
    rank: int,
    registry: Optional[SpecializationRegistry] = None,
) -> Callable[..., Any]:
    """
    Return the routine for ``template`` specialized to ``rank``.

    Uses :data:`SPECIALIZATIONS` unless another registry is given.
    """
    if registry is None:
        registry = SPECIALIZATIONS
    return registry.specialize(template, rank)

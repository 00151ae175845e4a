"""Suite data models for cavy test plans.

Defines the dataclasses a test plan is built from: test cases grouped into
scopes, each scope with an optional setup hook.
"""

import asyncio
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterator, Optional, Union

# A test body or setup hook receives the scope it belongs to.
ScopeCallable = Callable[["TestScope"], Union[Awaitable[Any], Any]]


@dataclass(frozen=True)
class TestCase:
    """A single named test."""
    __test__ = False

    description: str
    body: ScopeCallable


@dataclass
class TestScope:
    """A suite of test cases sharing an optional ``before_each`` hook.

    Cases are kept in definition order and run in that order.
    """
    __test__ = False

    name: str = ""
    test_cases: list[TestCase] = field(default_factory=list)
    before_each: Optional[ScopeCallable] = None
    host: Any = field(default=None, repr=False, compare=False)
    _labels: list[str] = field(default_factory=list, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.test_cases)

    def add_case(self, description: str, body: ScopeCallable) -> TestCase:
        """Append a test case, prefixed with any active ``describe`` label."""
        if self._labels:
            description = f"{': '.join(self._labels)}: {description}"
        case = TestCase(description=description, body=body)
        self.test_cases.append(case)
        return case

    def it(self, description: str) -> Callable[[ScopeCallable], ScopeCallable]:
        """Decorator registering the wrapped function as a test case.

        Usage:
            @scope.it("shows the welcome banner")
            async def _(scope):
                ...
        """
        def decorator(body: ScopeCallable) -> ScopeCallable:
            self.add_case(description, body)
            return body
        return decorator

    @contextmanager
    def describe(self, label: str) -> Iterator["TestScope"]:
        """Group the cases registered inside the block under ``label``."""
        self._labels.append(label)
        try:
            yield self
        finally:
            self._labels.pop()

    def set_before_each(self, hook: ScopeCallable) -> ScopeCallable:
        """Decorator form of assigning ``before_each``."""
        self.before_each = hook
        return hook

    async def pause(self, seconds: float) -> None:
        """Suspend the current test body for ``seconds``."""
        await asyncio.sleep(seconds)

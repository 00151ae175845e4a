"""Tests for the suite building blocks."""

import pytest

from cavy.suite.schema import TestCase, TestScope


def test_cases_keep_definition_order():
    scope = TestScope("checkout")

    @scope.it("adds an item")
    def _(scope):
        pass

    @scope.it("removes an item")
    def _(scope):
        pass

    assert len(scope) == 2
    assert [c.description for c in scope.test_cases] == ["adds an item", "removes an item"]


def test_describe_prefixes_descriptions():
    scope = TestScope()

    with scope.describe("Login"):
        scope.add_case("accepts valid password", lambda scope: None)
        with scope.describe("errors"):
            scope.add_case("rejects empty password", lambda scope: None)
    scope.add_case("no prefix", lambda scope: None)

    assert [c.description for c in scope.test_cases] == [
        "Login: accepts valid password",
        "Login: errors: rejects empty password",
        "no prefix",
    ]


def test_describe_label_removed_after_error():
    scope = TestScope()

    with pytest.raises(RuntimeError):
        with scope.describe("broken"):
            raise RuntimeError("oops")

    scope.add_case("after", lambda scope: None)
    assert scope.test_cases[0].description == "after"


def test_set_before_each_decorator():
    scope = TestScope()

    @scope.set_before_each
    def setup(scope):
        pass

    assert scope.before_each is setup


def test_it_returns_the_body_unchanged():
    scope = TestScope()

    def body(scope):
        return "ran"

    assert scope.it("x")(body) is body
    assert scope.test_cases[0].body is body


def test_test_case_is_immutable():
    case = TestCase("a", lambda scope: None)

    with pytest.raises(AttributeError):
        case.description = "b"


@pytest.mark.asyncio
async def test_pause_suspends(monkeypatch):
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)

    monkeypatch.setattr("cavy.suite.schema.asyncio.sleep", fake_sleep)
    await TestScope().pause(0.3)

    assert slept == [0.3]

"""Tests for the complex-object producer and its constructor plan cache."""

import threading
import time as time_module
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, ClassVar, Optional

import pytest
from pydantic import BaseModel

from fixture_engine.constraints.base import MaxLength, MinLength, Required
from fixture_engine.engine.object_generator import create_default_generator
from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.complex_type import (
    ComplexTypeProducer,
    ConstructorPlanCache,
    compute_constructor_plan,
)


@dataclass
class Person:
    alias: Annotated[str, MaxLength(16)]
    name: Annotated[str, Required(), MaxLength(24)]
    age: int


@dataclass
class Tagged:
    code: Annotated[str, MaxLength(8)]
    labels: Annotated[list[str], MaxLength(2)]


class Widget:
    def __init__(self, label: str):
        self.label = label
        self.source = "init"

    @classmethod
    def create(cls, label: str, size: int) -> "Widget":
        widget = cls(label)
        widget.size = size
        widget.source = "create"
        return widget

    @classmethod
    def _hidden(cls, a: int, b: int, c: int) -> "Widget":
        return cls("hidden")


class Tied:
    def __init__(self, value: int):
        self.value = value
        self.via = "init"

    @classmethod
    def build(cls, value: int) -> "Tied":
        tied = cls(value)
        tied.via = "build"
        return tied


class Account:
    owner: Annotated[str, MinLength(2), MaxLength(5)]
    balance: Decimal
    tags: ClassVar[list[str]] = []
    _secret: str = ""

    def __init__(self, number: int):
        self.number = number
        self._nickname = None

    @property
    def nickname(self) -> str:
        return self._nickname

    @nickname.setter
    def nickname(self, value):
        self._nickname = value

    @property
    def summary(self) -> str:
        return f"{self.number}:{self.owner}"


class Opaque:
    def __init__(self, value):
        self.value = value


class Gap:
    def __init__(self, first: int, skipped=None, last: str = "z", *, flag: bool):
        self.first = first
        self.skipped = skipped
        self.last = last
        self.flag = flag


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    z: int = field(default=0, init=False)


class Customer(BaseModel):
    name: Annotated[str, MaxLength(10)]
    score: int
    nickname: Optional[str] = None


@dataclass
class Order:
    customer: Customer
    lines: list[Annotated[str, MaxLength(6)]]
    note: Optional[str] = None


class Empty:
    pass


@pytest.fixture
def generator():
    """Create a seeded generator with the default producers."""
    return create_default_generator(seed=2024)


class TestConstructorPlan:
    """Tests for constructor selection."""

    def test_widest_constructor_wins(self):
        plan = compute_constructor_plan(Widget)
        assert plan.factory == Widget.create
        assert [p.name for p in plan.parameters] == ["label", "size"]

    def test_tie_goes_to_class_constructor(self):
        plan = compute_constructor_plan(Tied)
        assert plan.factory is Tied
        assert plan.arity == 1

    def test_private_factories_ignored(self):
        plan = compute_constructor_plan(Widget)
        assert plan.arity == 2

    def test_no_usable_constructor(self):
        with pytest.raises(ConfigurationError):
            compute_constructor_plan(Opaque)

    def test_skipped_parameters_switch_to_keywords(self):
        plan = compute_constructor_plan(Gap)
        assert [(p.name, p.keyword) for p in plan.parameters] == [
            ("first", False),
            ("last", True),
            ("flag", True),
        ]

    def test_members_not_covered_by_constructor(self):
        plan = compute_constructor_plan(Account)
        assert [m.name for m in plan.members] == ["owner", "balance", "nickname"]

    def test_frozen_dataclass_has_no_members(self):
        plan = compute_constructor_plan(Point)
        assert plan.members == ()

    def test_class_without_constructor(self):
        plan = compute_constructor_plan(Empty)
        assert plan.arity == 0


class TestComplexTypeProducer:
    """Tests for ComplexTypeProducer."""

    def test_builds_dataclass(self, generator):
        person = generator.generate(Person)
        assert isinstance(person, Person)
        assert isinstance(person.age, int)
        assert len(person.alias) == 15
        assert len(person.name) < 24

    def test_short_member_markers_honored(self, generator):
        for tagged in generator.generate_many(Tagged, 50):
            assert len(tagged.code) == 7
            assert len(tagged.labels) == 1

    def test_member_markers_applied_per_member(self, generator):
        generator.set_null_chance(100)
        for person in generator.generate_many(Person, 100, [Required()]):
            assert person.alias is None
            assert person.name is not None
            assert len(person.name) < 24

    def test_object_itself_can_be_null(self, generator):
        generator.set_null_chance(100)
        assert generator.generate(Person) is None

    def test_factory_invoked(self, generator):
        widget = generator.generate(Widget)
        assert widget.source == "create"
        assert isinstance(widget.size, int)

    def test_keyword_parameters_passed_by_name(self, generator):
        gap = generator.generate(Gap)
        assert isinstance(gap.first, int)
        assert gap.skipped is None
        assert isinstance(gap.last, str)
        assert isinstance(gap.flag, bool)

    def test_members_assigned(self, generator):
        account = generator.generate(Account)
        assert isinstance(account.number, int)
        assert 2 <= len(account.owner) < 5
        assert isinstance(account.balance, Decimal)
        assert isinstance(account.nickname, str)
        assert Account.tags == []
        assert account._secret == ""

    def test_frozen_dataclass(self, generator):
        point = generator.generate(Point)
        assert isinstance(point.x, int)
        assert point.z == 0

    def test_pydantic_model(self, generator):
        customer = generator.generate(Customer)
        assert isinstance(customer, Customer)
        assert isinstance(customer.name, str)
        assert isinstance(customer.score, int)

    def test_nested_objects(self, generator):
        order = generator.generate(Order)
        assert isinstance(order.customer, Customer)
        assert 8 <= len(order.lines) < 32
        assert all(len(line) < 6 for line in order.lines)

    def test_no_constructor_raises(self, generator):
        with pytest.raises(ConfigurationError):
            generator.generate(Opaque)

    def test_matches(self):
        producer = ComplexTypeProducer()
        assert producer.matches(Person)
        assert producer.matches(Customer)
        assert not producer.matches(int)
        assert not producer.matches(list)
        assert not producer.matches(list[int])
        assert not producer.matches(Optional[Person])

    def test_plan_reused(self, generator):
        producer = generator.producers.find(ComplexTypeProducer)
        list(generator.generate_many(Widget, 20))
        assert producer.cache.computations == 1
        assert Widget in producer.cache


class TestConstructorPlanCache:
    """Tests for ConstructorPlanCache."""

    def test_computes_once_per_class(self):
        cache = ConstructorPlanCache()
        first = cache.get(Person)
        second = cache.get(Person)
        cache.get(Widget)

        assert first is second
        assert cache.computations == 2
        assert len(cache) == 2

    def test_failures_not_cached(self):
        cache = ConstructorPlanCache()
        with pytest.raises(ConfigurationError):
            cache.get(Opaque)
        assert Opaque not in cache
        assert cache.computations == 0

    def test_concurrent_first_requests_compute_once(self):
        calls = []

        def slow_planner(shape):
            calls.append(shape)
            time_module.sleep(0.05)
            return compute_constructor_plan(shape)

        cache = ConstructorPlanCache(planner=slow_planner)
        workers = 16
        barrier = threading.Barrier(workers)
        plans = []
        errors = []

        def worker():
            try:
                barrier.wait()
                plans.append(cache.get(Person))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert calls == [Person]
        assert cache.computations == 1
        assert len(plans) == workers
        assert all(plan is plans[0] for plan in plans)

    def test_concurrent_generation(self, generator):
        workers = 8
        barrier = threading.Barrier(workers)
        results = []

        def worker():
            barrier.wait()
            results.extend(generator.generate_many(Order, 5))

        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        producer = generator.producers.find(ComplexTypeProducer)
        assert len(results) == workers * 5
        assert all(isinstance(order, Order) for order in results)
        assert producer.cache.computations == 2

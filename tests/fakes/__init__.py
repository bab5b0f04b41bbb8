from tests.fakes.books import make_book
from tests.fakes.fake_clock import FIXED_NOW, FakeClock, days_ago
from tests.fakes.fake_random import FakeRandomSource

__all__ = ["FIXED_NOW", "FakeClock", "FakeRandomSource", "days_ago", "make_book"]

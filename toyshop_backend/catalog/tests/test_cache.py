from django.db import DatabaseError
from django.test import SimpleTestCase

from catalog.services.cache import ExpiringValue
from catalog.services.catalog_store import PublicCatalog


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ExpiringValueTests(SimpleTestCase):
    """
    GUARANTEES:
    - Fresh values are served without recomputing
    - Expiry and invalidate() force a recompute
    - ttl <= 0 disables holding
    - A failing compute leaves the previous state untouched
    """

    def setUp(self):
        self.clock = FakeClock()
        self.calls = 0

    def _compute(self):
        self.calls += 1
        return f"value-{self.calls}"

    def test_fresh_value_is_reused(self):
        holder = ExpiringValue(60, clock=self.clock)

        self.assertEqual(holder.get_or_compute(self._compute), "value-1")
        self.clock.advance(59)
        self.assertEqual(holder.get_or_compute(self._compute), "value-1")
        self.assertEqual(self.calls, 1)

    def test_expired_value_is_recomputed(self):
        holder = ExpiringValue(60, clock=self.clock)
        holder.get_or_compute(self._compute)

        self.clock.advance(60)

        self.assertFalse(holder.is_fresh)
        self.assertEqual(holder.get_or_compute(self._compute), "value-2")

    def test_invalidate_forces_recompute(self):
        holder = ExpiringValue(60, clock=self.clock)
        holder.get_or_compute(self._compute)

        holder.invalidate()

        self.assertEqual(holder.get_or_compute(self._compute), "value-2")

    def test_zero_ttl_never_holds(self):
        holder = ExpiringValue(0, clock=self.clock)

        holder.get_or_compute(self._compute)
        holder.get_or_compute(self._compute)

        self.assertEqual(self.calls, 2)
        self.assertFalse(holder.is_fresh)

    def test_failed_compute_keeps_previous_value(self):
        holder = ExpiringValue(60, clock=self.clock)
        holder.get_or_compute(self._compute)
        self.clock.advance(61)

        def boom():
            raise DatabaseError("down")

        with self.assertRaises(DatabaseError):
            holder.get_or_compute(boom)

        # Nothing was stored by the failed attempt
        self.assertFalse(holder.is_fresh)
        self.assertEqual(holder.get_or_compute(self._compute), "value-2")


class PublicCatalogHolderTests(SimpleTestCase):
    def test_loader_runs_once_within_ttl(self):
        clock = FakeClock()
        loads = []

        def loader():
            loads.append(1)
            return ["item"]

        catalog = PublicCatalog(30, clock=clock, loader=loader)

        self.assertEqual(catalog.items(), ["item"])
        self.assertEqual(catalog.items(), ["item"])
        self.assertEqual(len(loads), 1)

        catalog.invalidate()
        catalog.items()
        self.assertEqual(len(loads), 2)

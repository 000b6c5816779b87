import unittest

from funcpy import (
    Try, Success, Failure, try_from_either, try_to_either,
    Left, Right, Some, NONE, NoSuchElementError,
)


class TestTryConstruction(unittest.TestCase):
    def test_of_captures_exceptions(self):
        self.assertEqual(Try.of(lambda: 1 + 1), Success(2))
        t = Try.of(lambda: 1 / 0)
        self.assertTrue(t.is_failure())
        self.assertTrue(isinstance(t.error, ZeroDivisionError))

    def test_of_does_not_capture_base_exceptions(self):
        def interrupt():
            raise KeyboardInterrupt()
        with self.assertRaises(KeyboardInterrupt):
            Try.of(interrupt)

    def test_constructors(self):
        self.assertEqual(Try.pure(1), Try.success(1))
        self.assertEqual(Try.unit(), Success(None))
        self.assertIs(Try.unit(), Try.unit())
        self.assertTrue(Try.failure(ValueError("x")).is_failure())


class TestTryAccessors(unittest.TestCase):
    def test_get_reraises(self):
        err = ValueError("bad")
        with self.assertRaises(ValueError) as cm:
            Failure(err).get()
        self.assertIs(cm.exception, err)
        self.assertEqual(Success(3).get(), 3)

    def test_fallbacks(self):
        f = Failure(ValueError("x"))
        self.assertEqual(f.get_or_else(1), 1)
        self.assertEqual(f.get_or_else_l(lambda: 2), 2)
        self.assertIsNone(f.or_null())
        self.assertEqual(f.or_else(Success(5)), Success(5))
        self.assertEqual(f.or_else_l(lambda: Success(6)), Success(6))
        self.assertEqual(Success(1).or_else(Success(5)), Success(1))

    def test_failed(self):
        err = ValueError("x")
        self.assertEqual(Failure(err).failed(), Success(err))
        projected = Success(1).failed()
        self.assertTrue(isinstance(projected.error, NoSuchElementError))
        self.assertEqual(projected.error.label, "Try.failed")


class TestTryCombinators(unittest.TestCase):
    def test_map_captures(self):
        self.assertEqual(Success(1).map(lambda x: x + 1), Success(2))
        self.assertTrue(Success(1).map(lambda x: x / 0).is_failure())
        f = Failure(ValueError("x"))
        self.assertIs(f.map(lambda x: self.fail("mapper ran")), f)

    def test_flat_map_and_filter(self):
        self.assertEqual(Success(2).flat_map(lambda x: Success(x * 2)), Success(4))
        self.assertTrue(Success(2).flat_map(lambda x: [][0]).is_failure())
        self.assertEqual(Success(2).filter(lambda x: x > 1), Success(2))
        filtered = Success(2).filter(lambda x: x > 5)
        self.assertEqual(filtered.error.label, "Try.filter")

    def test_recover(self):
        f = Failure(ValueError("x"))
        self.assertEqual(f.recover(lambda e: str(e)), Success("x"))
        self.assertEqual(f.recover_with(lambda e: Success(0)), Success(0))
        self.assertEqual(Success(1).recover(lambda e: 0), Success(1))
        self.assertTrue(f.recover(lambda e: 1 / 0).error.__class__ is ZeroDivisionError)

    def test_transform_and_fold(self):
        self.assertEqual(Success(1).transform(lambda e: Success(0), lambda x: Success(x + 1)), Success(2))
        self.assertEqual(Failure(ValueError()).transform(lambda e: Success(0), lambda x: Success(x)), Success(0))
        self.assertEqual(Failure(ValueError("m")).fold(lambda e: str(e), lambda x: "ok"), "m")
        self.assertEqual(Success(1).fold(lambda e: 0, lambda x: x * 10), 10)

    def test_conversions(self):
        err = ValueError("x")
        self.assertEqual(Success(5).to_option(), Some(5))
        self.assertIs(Failure(err).to_option(), NONE)
        self.assertEqual(Success(5).to_either(), Right(5))
        self.assertEqual(Failure(err).to_either(), Left(err))
        self.assertEqual(try_from_either(Left(err)), Failure(err))
        self.assertEqual(try_from_either(Right(1)), Success(1))
        self.assertTrue(isinstance(try_to_either(Success(2)), Right))

    def test_map_n(self):
        err = ValueError("first")
        self.assertEqual(Try.map2(Success(1), Success(2), lambda a, b: a + b), Success(3))
        self.assertEqual(Try.map3(Success(1), Failure(err), Failure(KeyError()), lambda *xs: 0), Failure(err))
        self.assertEqual(Try.map6(*[Success(i) for i in range(6)], lambda *xs: sum(xs)), Success(15))
        self.assertTrue(Try.map2(Success(1), Success(0), lambda a, b: a / b).is_failure())

    def test_tail_rec_m(self):
        r = Try.tail_rec_m(0, lambda n: Success(Left(n + 1)) if n < 100000 else Success(Right(n)))
        self.assertEqual(r, Success(100000))
        self.assertTrue(Try.tail_rec_m(0, lambda n: 1 / 0).is_failure())


class TestTryEquality(unittest.TestCase):
    def test_equals_and_hash(self):
        a = Failure(ValueError("x")); b = Failure(ValueError("x"))
        self.assertEqual(a, b)
        self.assertEqual(a.hash_code(), b.hash_code())
        self.assertNotEqual(a, Failure(KeyError("x")))
        self.assertNotEqual(Success(1), Failure(ValueError(1)))
        self.assertEqual(hash(Success([1])), hash(Success([1])))

"""
Unit tests for cross-resolution conversion.
"""
import random
import unittest
from precisetime.converter import (
    convert,
    to_microseconds,
    to_nanoseconds,
    nanoseconds_to_microseconds,
    microseconds_to_nanoseconds,
)
from precisetime.core.types import Resolution
from precisetime.microsecond import MicrosecondTime
from precisetime.nanosecond import NanosecondTime

class TestConverter(unittest.TestCase):
    def test_nanoseconds_to_microseconds_truncates(self):
        value = to_microseconds(NanosecondTime(5, 123456789))
        self.assertIsInstance(value, MicrosecondTime)
        self.assertEqual(value.as_tuple(), (5, 123456))

    def test_microseconds_to_nanoseconds_is_exact(self):
        value = to_nanoseconds(MicrosecondTime(5, 123456))
        self.assertIsInstance(value, NanosecondTime)
        self.assertEqual(value.as_tuple(), (5, 123456000))

    def test_raw_input_is_normalized_first(self):
        self.assertEqual(nanoseconds_to_microseconds(10, -1).as_tuple(), (9, 999999))
        self.assertEqual(nanoseconds_to_microseconds(1, 2500000999).as_tuple(), (3, 500000))
        self.assertEqual(microseconds_to_nanoseconds(10, -1).as_tuple(), (9, 999999000))
        self.assertEqual(microseconds_to_nanoseconds(0, 3000001).as_tuple(), (3, 1000))

    def test_microsecond_round_trip_is_identity(self):
        rng = random.Random(99)
        for _ in range(500):
            original = MicrosecondTime(rng.randint(-10**9, 10**9), rng.randint(0, 999999))
            self.assertEqual(original.to_nanoseconds().to_microseconds(), original)

    def test_nanosecond_round_trip_drops_only_sub_microsecond(self):
        rng = random.Random(100)
        for _ in range(500):
            original = NanosecondTime(rng.randint(-10**9, 10**9), rng.randint(0, 999999999))
            back = original.to_microseconds()
            self.assertEqual(back.seconds, original.seconds)
            remainder = original.nanoseconds - back.microseconds * 1000
            self.assertTrue(0 <= remainder < 1000)

    def test_convert(self):
        value = NanosecondTime(1, 1500)
        self.assertEqual(convert(value, Resolution.MICROSECOND), MicrosecondTime(1, 1))
        same = convert(value, Resolution.NANOSECOND)
        self.assertEqual(same, value)
        self.assertIsNot(same, value)
        self.assertEqual(convert(MicrosecondTime(1, 1), Resolution.NANOSECOND), NanosecondTime(1, 1000))

    def test_wrong_input_type(self):
        with self.assertRaises(TypeError):
            to_microseconds(MicrosecondTime(1, 0))
        with self.assertRaises(TypeError):
            to_nanoseconds(NanosecondTime(1, 0))
        with self.assertRaises(TypeError):
            convert((1, 0), Resolution.NANOSECOND)

if __name__ == '__main__':
    unittest.main()

"""
Unit tests for the time context and the fail-fast overflow policy.
"""
import unittest
from precisetime.core.constants import INT64_MAX, INT64_MIN, NS_PER_SECOND
from precisetime.core.context import TimeContext, TIME_CONTEXT, init_time_context, get_time_context
from precisetime.core.errors import TimeOverflowError
from precisetime.microsecond import MicrosecondTime
from precisetime.nanosecond import NanosecondTime

class TestTimeContext(unittest.TestCase):
    def test_default_is_int64(self):
        self.assertEqual(TIME_CONTEXT.seconds_min, INT64_MIN)
        self.assertEqual(TIME_CONTEXT.seconds_max, INT64_MAX)
        self.assertIs(get_time_context(), TIME_CONTEXT)

    def test_from_bits(self):
        ctx = TimeContext.from_bits(32)
        self.assertEqual(ctx.seconds_min, -2147483648)
        self.assertEqual(ctx.seconds_max, 2147483647)
        with self.assertRaises(ValueError):
            TimeContext.from_bits(1)

    def test_invalid_range(self):
        with self.assertRaises(ValueError):
            TimeContext(seconds_min=10, seconds_max=0)

class TestOverflowPolicy(unittest.TestCase):
    def setUp(self):
        self.previous = init_time_context(TimeContext.from_bits(32))

    def tearDown(self):
        init_time_context(self.previous)

    def test_add_overflow_raises(self):
        a = NanosecondTime(2147483647, 999999999)
        with self.assertRaises(TimeOverflowError) as cm:
            a + NanosecondTime(0, 1)
        self.assertEqual(cm.exception.seconds, 2147483648)
        self.assertIsInstance(cm.exception, OverflowError)

    def test_in_place_overflow_leaves_receiver_untouched(self):
        a = MicrosecondTime(-2147483648, 0)
        with self.assertRaises(TimeOverflowError):
            a -= MicrosecondTime(0, 1)
        self.assertEqual(a.as_tuple(), (-2147483648, 0))

    def test_normalize_overflow_raises(self):
        with self.assertRaises(TimeOverflowError):
            NanosecondTime(2147483647, NS_PER_SECOND)

    def test_in_range_values_pass(self):
        value = NanosecondTime(2147483646, 999999999) + NanosecondTime(0, 1)
        self.assertEqual(value.as_tuple(), (2147483647, 0))

class TestDefaultOverflow(unittest.TestCase):
    def test_int64_boundary(self):
        with self.assertRaises(TimeOverflowError):
            NanosecondTime(INT64_MAX, NS_PER_SECOND)
        with self.assertRaises(TimeOverflowError):
            NanosecondTime(INT64_MIN, 0) - NanosecondTime(0, 1)

if __name__ == '__main__':
    unittest.main()

from unittest import TestCase

import rational.parser
from rational.rational import Rational


class TestParse(TestCase):
    def test_simple(self):
        r = rational.parser.parse('3/4')
        self.assertEqual(r, Rational(3, 4))

    def test_normalizes(self):
        r = rational.parser.parse(' 40 / -60 ')
        self.assertEqual(str(r), '-2/3')

    def test_integer(self):
        self.assertEqual(str(rational.parser.parse('7')), '7/1')
        self.assertEqual(str(rational.parser.parse('-7')), '-7/1')

    def test_zero_denominator(self):
        with self.assertLogs('rational.rational', level='WARNING'):
            r = rational.parser.parse('5/0')
        self.assertEqual(str(r), '5/1')

    def test_invalid(self):
        for text in ['', 'abc', '1/2/3', '1.5', '3/', '/4']:
            with self.assertRaises(ValueError):
                rational.parser.parse(text)

    def test_from_string(self):
        self.assertEqual(str(Rational.from_string('5/10')), '1/2')

    def test_round_trip(self):
        for r in [Rational(), Rational(3, 4), Rational(40, -60), Rational(0, 5), Rational(-9, 1)]:
            out = rational.parser.parse(str(r))
            self.assertEqual(out, r)
            self.assertEqual(str(out), str(r))

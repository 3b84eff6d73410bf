import contextlib
import io
from unittest import TestCase

import plac

import rational.demo


class TestMain(TestCase):
    def run_main(self, **kwargs):
        out = io.StringIO()
        with self.assertLogs('rational.rational', level='WARNING') as cm:
            with contextlib.redirect_stdout(out):
                rational.demo.main(**kwargs)
        return out.getvalue().splitlines(), cm

    def test_defaults(self):
        lines, cm = self.run_main(loglevel='WARNING')
        self.assertEqual(lines[:4], ['r1: 3/4', 'r2: 1/1', 'r2: 1/2', 'sum: 5/4'])
        self.assertIn('r4: -2/3', lines)
        self.assertIn('gcd(40, 60): 20', lines)
        self.assertIn('r5: -2/1', lines)
        self.assertIn('r4: 1/5', lines)
        self.assertIn('r8: 23/4', lines)
        self.assertIn('r9: 23/4', lines)
        self.assertIn('r10++: 1/2', lines)
        self.assertIn('++r10: 5/2', lines)
        self.assertEqual(lines[-1], 'r2 == 2/4: True')
        self.assertEqual(len(cm.records), 1)

    def test_operands(self):
        lines, cm = self.run_main(loglevel='WARNING', a='1/3', b='1/6')
        self.assertIn('sum: 1/2', lines)
        self.assertIn('diff: 1/6', lines)
        self.assertIn('r1 < r2: False', lines)

    def test_bad_loglevel(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(ValueError):
                rational.demo.main(loglevel='verbose')
        self.assertEqual(out.getvalue(), '')

    def test_command_line(self):
        out = io.StringIO()
        with self.assertLogs('rational.rational', level='WARNING'):
            with contextlib.redirect_stdout(out):
                plac.call(rational.demo.main, ['-a', '1/3', '-loglevel', 'WARNING'])
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], 'r1: 1/3')
        self.assertIn('sum: 5/6', lines)

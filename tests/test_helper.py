import unittest
import os
import sys
from typing import List, Tuple

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from nftsim import constants
from nftsim.backends.fake import Fake
from nftsim.objects import NftablesObject
from nftsim.transaction import Transaction


class FakeTestCaseBase(unittest.TestCase):
    family = constants.INET_FAMILY
    table_name = 't'

    def setUp(self):
        self.fake = Fake(self.family, self.table_name)

    def _transaction(self, *operations: Tuple[str, NftablesObject]) -> Transaction:
        """Build a transaction from (verb, object) pairs"""
        tx = Transaction()
        for verb, obj in operations:
            getattr(tx, verb)(obj)
        return tx

    def _run(self, *operations: Tuple[str, NftablesObject]) -> None:
        self.fake.run(self._transaction(*operations))

    def _rule_texts(self, chain: str) -> List[str]:
        return [rule.rule for rule in self.fake.list_rules(chain)]

    def _element_keys(self, object_type: str, name: str) -> List[str]:
        return [element.key for element in self.fake.list_elements(object_type, name)]

    def assert_dump_equal(self, actual_dump: str, expected_lines: List[str]):
        actual_lines = actual_dump.splitlines()

        self.assertEqual(len(actual_lines), len(expected_lines),
                         "Number of lines differ.\nActual: {0}\nExpected: {1}".format(actual_lines, expected_lines))

        for i, actual_line in enumerate(actual_lines):
            self.assertEqual(actual_line, expected_lines[i],
                             "Line {0} differs.\nActual:   {1}\nExpected: {2}".format(i+1, actual_line, expected_lines[i]))
        if actual_dump:
            self.assertTrue(actual_dump.endswith("\n"))

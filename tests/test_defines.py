import unittest
import sys
import os

# Adjust path to import nftsim
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from nftsim import constants
from nftsim.defines import Define, Defines


class TestDefines(unittest.TestCase):

    def test_ipv4_defaults(self):
        defines = Defines.for_family(constants.IPV4_FAMILY)
        self.assertEqual(list(defines), [Define("IP", "ip"), Define("INET_ADDR", "ipv4_addr")])
        self.assertEqual(defines.substitute("$IP saddr"), "ip saddr")
        self.assertEqual(defines.substitute("$INET_ADDR"), "ipv4_addr")

    def test_ipv6_defaults(self):
        defines = Defines.for_family(constants.IPV6_FAMILY)
        self.assertEqual(defines.substitute("$IP daddr . $INET_ADDR"), "ip6 daddr . ipv6_addr")

    def test_inet_has_no_defaults(self):
        defines = Defines.for_family(constants.INET_FAMILY)
        self.assertEqual(len(defines), 0)
        self.assertEqual(defines.substitute("$IP saddr"), "$IP saddr")

    def test_none_passes_through(self):
        defines = Defines.for_family(constants.IPV4_FAMILY)
        self.assertIsNone(defines.substitute(None))

    def test_every_occurrence_replaced(self):
        defines = Defines()
        defines.define("NET", "10.0.0.0/8")
        self.assertEqual(defines.substitute("ip saddr $NET ip daddr $NET"),
                         "ip saddr 10.0.0.0/8 ip daddr 10.0.0.0/8")

    def test_earlier_define_wins_on_shared_prefix(self):
        defines = Defines()
        defines.define("IP", "ip")
        defines.define("IPSET", "@allowed")
        self.assertEqual(defines.substitute("$IPSET"), "ipSET")

    def test_later_longer_define_wins_when_registered_first(self):
        defines = Defines()
        defines.define("IPSET", "@allowed")
        defines.define("IP", "ip")
        self.assertEqual(defines.substitute("$IP saddr $IPSET"), "ip saddr @allowed")

    def test_substituted_values_not_expanded_again(self):
        defines = Defines()
        defines.define("A", "$B")
        defines.define("B", "x")
        self.assertEqual(defines.substitute("$A $B"), "$B x")

    def test_unknown_placeholder_untouched(self):
        defines = Defines()
        defines.define("IP", "10.0.0.1")
        self.assertEqual(defines.substitute("$PORT"), "$PORT")

    def test_deterministic(self):
        defines = Defines()
        defines.define("IP", "10.0.0.1")
        self.assertEqual(defines.substitute("ip daddr $IP drop"), defines.substitute("ip daddr $IP drop"))


if __name__ == '__main__':
    unittest.main()

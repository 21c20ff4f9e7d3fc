""" Constants shared by the object model and the backends """

# Address families
IPV4_FAMILY = "ip"
IPV6_FAMILY = "ip6"
INET_FAMILY = "inet"
ARP_FAMILY = "arp"
BRIDGE_FAMILY = "bridge"
NETDEV_FAMILY = "netdev"

FAMILIES = [
    IPV4_FAMILY,
    IPV6_FAMILY,
    INET_FAMILY,
    ARP_FAMILY,
    BRIDGE_FAMILY,
    NETDEV_FAMILY,
]

# Transaction verbs
ADD_VERB = "add"
CREATE_VERB = "create"
FLUSH_VERB = "flush"
DELETE_VERB = "delete"

VERBS = [ADD_VERB, CREATE_VERB, FLUSH_VERB, DELETE_VERB]

# Verbs which (attempt to) create an object and therefore consume a handle
HANDLE_VERBS = [ADD_VERB, CREATE_VERB]

# Object kinds as accepted by the list accessors
LIST_OBJECT_TYPES = {
    "chain": "chains",
    "chains": "chains",
    "set": "sets",
    "sets": "sets",
    "map": "maps",
    "maps": "maps",
}

# Defines seeded into a backend, per family. The inet family gets none since
# it is unknown which of ip/ip6 is wanted.
DEFAULT_DEFINES = {
    IPV4_FAMILY: [("IP", "ip"), ("INET_ADDR", "ipv4_addr")],
    IPV6_FAMILY: [("IP", "ip6"), ("INET_ADDR", "ipv6_addr")],
}

DEFINE_SIGIL = "$"

# Separator for concatenated set/map keys
CONCAT_SEPARATOR = " . "

DEFAULT_BACKEND = "fake"
CONFIG_SECTION = "nftsim"
CONFIG_DEFINES_SECTION = "defines"

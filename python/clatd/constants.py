from pathlib import Path

VERSION = "1.0.0"

# files paths
CONFIG_FILE = Path("/system/etc/clatd.conf")

# configuration defaults
DEFAULT_IPV4_LOCAL_SUBNET = "192.0.0.4"
DEFAULT_DNS64_DETECTION_HOSTNAME = "ipv4only.arpa"
DEFAULT_MTU = "-1"
DEFAULT_IPV6_HOST_ID = "::"

# well-known IPv4 addresses of 'ipv4only.arpa' (RFC 7050)
DNS64_WELL_KNOWN_ADDRESSES = ("192.0.0.170", "192.0.0.171")

# netId meaning "use the default network"
NETID_UNSET = 0

# seconds
DNS64_BACKOFF_START = 1
DNS64_BACKOFF_MAX = 120

# includes the terminating NUL byte
IFNAMSIZ = 16

# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from netaddr import AddrFormatError, IPAddress, IPNetwork

_ADDRESS_WIDTH = {4: 32, 6: 128}


def get_provision_range(cidr: str) -> tuple[IPAddress, IPAddress]:
    """Return the first and last usable addresses of `cidr`.

    The network and broadcast addresses of an IPv4 network aren't usable,
    unless the network is a /31 or /32. For IPv6 only the subnet-router
    anycast address (the first one) is skipped, unless the network is a
    /127 or /128.

    :raises ValueError: if `cidr` isn't a valid network.
    """
    if not isinstance(cidr, str) or "/" not in cidr:
        raise ValueError(f"'{cidr}' is not a valid CIDR.")
    try:
        network = IPNetwork(cidr)
    except (AddrFormatError, ValueError) as e:
        raise ValueError(f"'{cidr}' is not a valid CIDR.") from e

    first, last = network.first, network.last
    if network.prefixlen < _ADDRESS_WIDTH[network.version] - 1:
        first += 1
        if network.version == 4:
            last -= 1
    return (
        IPAddress(first, network.version),
        IPAddress(last, network.version),
    )

# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

# Networks and pools carrying this nic tag are never exposed to accounts.
ADMIN_NIC_TAG = "admin"

# Docker label used to request (and report) the fabric VLAN of a network.
VLAN_ID_LABEL = "triton.network.vlan_id"

# Fabric VLAN ids range from 0 through to 1023, and 1 is reserved.
VLAN_ID_COUNT = 1024
RESERVED_VLAN_ID = 1

# Number of free VLAN ids to try before giving up on creating a fabric VLAN.
FREE_VLAN_CANDIDATES = 10

# Message returned by NAPI when another request grabbed the VLAN id first.
VLAN_ID_IN_USE_MESSAGE = "VLAN ID is already in use"

# Header used to correlate the NAPI calls of a single request.
REQUEST_ID_HEADER = "x-request-id"

DOCKER_NETWORK_DRIVER = "Triton"
DOCKER_NETWORK_MTU_OPTION = "com.docker.network.driver.mtu"

# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

# Generic
INVALID_ARGUMENT_VIOLATION_TYPE = "InvalidArgumentViolation"
UNEXISTING_RESOURCE_VIOLATION_TYPE = "UnexistingResourceViolation"

# Networks
AMBIGUOUS_NETWORK_ID_VIOLATION_TYPE = "AmbiguousNetworkIdViolation"
NETWORK_NOT_FOUND_VIOLATION_TYPE = "NetworkNotFoundViolation"

# NAPI
NAPI_REQUEST_FAILED_VIOLATION_TYPE = "NapiRequestFailedViolation"

# VLANs
NO_FREE_VLAN_VIOLATION_TYPE = "NoFreeVlanViolation"
